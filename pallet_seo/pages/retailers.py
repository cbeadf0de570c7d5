"""Retailer liquidation pages (16) with retailer-specific terminology."""

from pallet_seo.pages.models import page

RETAILERS = [
    page(
        "amazon-liquidation", "Amazon", "retailer",
        keywords=["amazon liquidation pallets", "amazon returns", "FBA liquidation", "amazon overstock"],
        angles=[
            ("fba-returns", "FBA Returns", 0.9, ["Fulfilled by Amazon returns", "FBA customer returns", "Prime member returns", "warehouse deals"]),
            ("condition-codes", "Condition Grading", 0.8, ["LPN tracking", "condition codes", "sortable vs non-sortable", "FC grading"]),
            ("lot-types", "Amazon Lot Types", 0.85, ["Amazon Smalls", "Amazon Mediums", "Amazon Monsters", "high piece count", "HD loads"]),
        ],
        related_terms=["FC", "LPN", "Smalls", "Mediums", "Monsters", "HPC", "FBA", "FBM", "warehouse deals", "customer returns"],
        specific_terms=["Amazon FC returns", "LPN manifested loads", "sortable truckloads", "non-sortable pallets", "Amazon HD", "mystery boxes"],
        image_style="modern fulfillment center with Amazon-branded boxes on conveyor belts and pallets",
    ),
    page(
        "walmart-liquidation", "Walmart", "retailer",
        keywords=["walmart liquidation", "walmart overstock pallets", "walmart returns", "walmart GM truckloads"],
        angles=[
            ("gm-truckloads", "GM Truckloads", 0.9, ["general merchandise truckloads", "mixed GM pallets", "department store returns"]),
            ("shelf-pulls", "Shelf Pulls", 0.8, ["retail shelf pulls", "store reset merchandise", "planogram changes"]),
            ("regional-dcs", "Regional Distribution", 0.7, ["regional DC loads", "4-way pallets", "store-level returns"]),
        ],
        related_terms=["GM truckloads", "shelf pulls", "4-way pallets", "store resets", "dot-com returns", "supercenter overstock"],
        specific_terms=["Walmart.com returns", "supercenter liquidation", "neighborhood market overstock", "regional DC surplus"],
        image_style="large retail distribution center with blue and yellow accents, organized pallet racks",
    ),
    page(
        "target-liquidation", "Target", "retailer",
        keywords=["target liquidation", "target returns pallets", "target overstock", "target truckloads"],
        angles=[
            ("raw-loads", "Raw/Unsorted Loads", 0.85, ["raw unsorted returns", "unmanifested loads", "blind pallets"]),
            ("case-pack", "Case Pack Clothing", 0.8, ["case pack apparel", "new with tags", "seasonal clothing loads"]),
            ("private-label", "Private Label Mix", 0.7, ["Target private label", "exclusive brands", "owned brand inventory"]),
        ],
        related_terms=["raw loads", "unsorted returns", "case pack", "Target Circle returns", "seasonal bulge", "private label"],
        specific_terms=["Target+ marketplace returns", "in-store returns", "Target exclusive brands", "seasonal clearance loads"],
        image_style="bright retail warehouse with red accents and organized merchandise bins",
    ),
    page(
        "costco-liquidation", "Costco", "retailer",
        keywords=["costco liquidation", "costco returns pallets", "costco overstock", "bulk liquidation"],
        angles=[
            ("bulk-returns", "Bulk Returns", 0.9, ["membership returns", "bulk item returns", "oversized merchandise"]),
            ("appliances", "Appliances & Furniture", 0.85, ["large appliances", "furniture returns", "patio sets", "mattresses"]),
            ("kirkland", "Kirkland Brand", 0.7, ["Kirkland Signature", "private label", "exclusive products"]),
        ],
        related_terms=["bulk returns", "membership items", "Kirkland brand", "oversized pallets", "appliance liquidation"],
        specific_terms=["Costco Business Center returns", "warehouse club overstock", "executive member returns", "organic closeouts"],
        image_style="warehouse club interior with large bulk items and industrial shelving",
    ),
    page(
        "sams-club-liquidation", "Sam's Club", "retailer",
        keywords=["sam's club liquidation", "sam's club returns", "sam's club pallets", "wholesale club liquidation"],
        angles=[
            ("business-returns", "Business Member Returns", 0.85, ["business member returns", "commercial overstock", "bulk office supplies"]),
            ("mixed-gm", "Mixed GM Loads", 0.8, ["mixed general merchandise", "club store inventory", "multi-category pallets"]),
        ],
        related_terms=["club store returns", "business member", "bulk merchandise", "commercial inventory", "multi-pack items"],
        specific_terms=["Sam's Club Plus returns", "Scan & Go returns", "club store exclusives", "business center liquidation"],
        image_style="wholesale warehouse with bulk merchandise displays and wide aisles",
    ),
    page(
        "home-depot-liquidation", "Home Depot", "retailer",
        keywords=["home depot liquidation", "home depot tools pallets", "home depot returns", "HD liquidation"],
        angles=[
            ("tools", "Power Tools", 0.95, ["power tools", "cordless tools", "contractor-grade", "professional tools"]),
            ("testing", "Testing Requirements", 0.85, ["tool testing", "battery verification", "charger presence", "functional inspection"]),
            ("home-improvement", "Home Improvement", 0.8, ["lighting fixtures", "faucets", "plumbing supplies", "building materials"]),
        ],
        related_terms=["power tools", "cordless", "DeWalt", "Milwaukee", "Ryobi", "lighting", "faucets", "plumbing", "contractor returns"],
        specific_terms=["Pro Desk returns", "contractor-grade tools", "HD tool rental returns", "special order cancellations"],
        image_style="home improvement warehouse with orange accents, organized tool displays and building materials",
    ),
    page(
        "lowes-liquidation", "Lowe's", "retailer",
        keywords=["lowe's liquidation", "lowe's tools pallets", "lowe's returns", "lowe's overstock"],
        angles=[
            ("power-tools", "Power Tools", 0.9, ["Kobalt tools", "Craftsman", "power tool sets", "cordless systems"]),
            ("garden", "Garden & Outdoor", 0.85, ["lawn and garden", "outdoor power equipment", "patio furniture", "seasonal plants"]),
            ("hardware", "Hardware & Plumbing", 0.8, ["plumbing fixtures", "hardware assortments", "fasteners", "electrical supplies"]),
        ],
        related_terms=["Kobalt", "Craftsman", "garden center", "outdoor living", "plumbing", "hardware", "seasonal"],
        specific_terms=["Lowe's Pro returns", "Kobalt tool liquidation", "garden center clearance", "installation returns"],
        image_style="blue-themed home improvement store with tools, garden supplies, and hardware sections",
    ),
    page(
        "ace-hardware-liquidation", "Ace Hardware", "retailer",
        keywords=["ace hardware liquidation", "ace hardware pallets", "hardware store liquidation"],
        angles=[
            ("hardware", "Hardware Assortments", 0.9, ["hardware assortments", "fastener lots", "hand tools", "paint supplies"]),
            ("seasonal", "Seasonal Merchandise", 0.85, ["seasonal outdoor", "holiday decorations", "lawn care", "winter supplies"]),
        ],
        related_terms=["hardware store", "paint supplies", "hand tools", "seasonal", "lawn care", "outdoor living"],
        specific_terms=["Ace-branded products", "cooperative store returns", "neighborhood hardware overstock"],
        image_style="neighborhood hardware store with red signage and organized tool displays",
    ),
    page(
        "macys-liquidation", "Macy's", "retailer",
        keywords=["macy's liquidation", "macy's returns pallets", "macy's clothing liquidation", "department store liquidation"],
        angles=[
            ("designer-apparel", "Designer Apparel", 0.9, ["designer clothing", "brand-name fashion", "department store apparel"]),
            ("shoes-accessories", "Shoes & Accessories", 0.85, ["designer shoes", "handbags", "jewelry", "accessories"]),
            ("beauty", "Beauty & Cosmetics", 0.8, ["prestige beauty", "cosmetics", "fragrances", "skincare"]),
        ],
        related_terms=["designer brands", "department store", "fashion apparel", "cosmetics", "shoes", "handbags"],
        specific_terms=["Macy's Backstage returns", "store closing inventory", "seasonal fashion clearance", "prestige brand liquidation"],
        image_style="upscale department store interior with fashion displays and beauty counters",
    ),
    page(
        "kohls-liquidation", "Kohl's", "retailer",
        keywords=["kohl's liquidation", "kohl's returns pallets", "kohl's clothing liquidation"],
        angles=[
            ("apparel", "Family Apparel", 0.9, ["family clothing", "men's apparel", "women's fashion", "children's clothing"]),
            ("home-goods", "Home Goods", 0.8, ["home décor", "bedding", "kitchen items", "small appliances"]),
            ("amazon-returns", "Amazon Returns", 0.75, ["Kohl's Amazon returns", "return hub inventory", "mixed retail returns"]),
        ],
        related_terms=["family apparel", "home goods", "bedding", "kitchen", "Amazon returns hub", "private label"],
        specific_terms=["Kohl's Cash returns", "Amazon return hub overflow", "clearance event inventory", "Sonoma brand liquidation"],
        image_style="family department store with clothing racks and home goods displays",
    ),
    page(
        "jcpenney-liquidation", "JCPenney", "retailer",
        keywords=["jcpenney liquidation", "jcpenney returns pallets", "jcpenney clothing"],
        angles=[
            ("apparel", "Apparel & Footwear", 0.9, ["family apparel", "footwear", "work clothing", "casual wear"]),
            ("home", "Home & Bedding", 0.85, ["home goods", "bedding sets", "window treatments", "bath accessories"]),
        ],
        related_terms=["family clothing", "home goods", "bedding", "footwear", "work apparel", "window treatments"],
        specific_terms=["JCP private label", "store consolidation inventory", "salon equipment", "portrait studio equipment"],
        image_style="traditional department store with clothing and home goods sections",
    ),
    page(
        "nordstrom-liquidation", "Nordstrom", "retailer",
        keywords=["nordstrom liquidation", "nordstrom returns pallets", "designer liquidation", "premium apparel liquidation"],
        angles=[
            ("designer", "Designer Brands", 0.95, ["designer fashion", "premium brands", "luxury apparel", "high-end merchandise"]),
            ("shoes", "Premium Footwear", 0.9, ["designer shoes", "premium footwear", "brand-name heels", "luxury sneakers"]),
            ("beauty", "Prestige Beauty", 0.85, ["prestige cosmetics", "luxury skincare", "designer fragrances"]),
        ],
        related_terms=["designer brands", "luxury fashion", "premium footwear", "prestige beauty", "high-end accessories"],
        specific_terms=["Nordstrom Rack overflow", "anniversary sale returns", "designer consignment returns", "alterations returns"],
        image_style="upscale retail environment with designer fashion displays and premium merchandise",
    ),
    page(
        "best-buy-liquidation", "Best Buy", "retailer",
        keywords=["best buy liquidation", "best buy returns pallets", "electronics liquidation", "tech liquidation"],
        angles=[
            ("electronics", "Consumer Electronics", 0.95, ["TVs", "laptops", "tablets", "smartphones", "gaming consoles"]),
            ("open-box", "Open Box Items", 0.9, ["open box", "display models", "customer returns", "certified refurbished"]),
            ("appliances", "Appliances", 0.8, ["major appliances", "small appliances", "kitchen electronics"]),
        ],
        related_terms=["consumer electronics", "TVs", "laptops", "gaming", "open box", "Geek Squad", "appliances"],
        specific_terms=["Geek Squad returns", "Total Tech returns", "display model clearance", "discontinued SKUs"],
        image_style="electronics retail store with TV walls, laptop displays, and appliance sections",
    ),
    page(
        "tjmaxx-liquidation", "TJ Maxx", "retailer",
        keywords=["tj maxx liquidation", "tj maxx pallets", "off-price retail liquidation"],
        angles=[
            ("apparel", "Off-Price Apparel", 0.9, ["off-price fashion", "brand-name clothing", "designer discounts"]),
            ("home", "Home Décor", 0.85, ["home décor", "accent furniture", "decorative items", "seasonal décor"]),
            ("beauty", "Beauty & Fragrance", 0.8, ["prestige beauty", "fragrances", "bath products"]),
        ],
        related_terms=["off-price retail", "designer discounts", "home décor", "brand-name fashion", "Runway finds"],
        specific_terms=["TJX returns", "Marshalls crossover", "HomeGoods overflow", "designer closeouts"],
        image_style="treasure hunt retail environment with clothing racks and home décor displays",
    ),
    page(
        "cvs-liquidation", "CVS", "retailer",
        keywords=["cvs liquidation", "cvs pallets", "drugstore liquidation", "health beauty liquidation"],
        angles=[
            ("hba", "Health & Beauty", 0.95, ["health and beauty", "personal care", "skincare", "haircare"]),
            ("otc", "OTC Medicine", 0.9, ["over-the-counter", "vitamins", "supplements", "first aid"]),
            ("seasonal", "Seasonal & GM", 0.8, ["seasonal merchandise", "holiday items", "general merchandise"]),
        ],
        related_terms=["HBA", "health beauty", "OTC", "personal care", "vitamins", "seasonal", "pharmacy retail"],
        specific_terms=["ExtraCare returns", "pharmacy overstock", "seasonal reset merchandise", "planogram clearance"],
        image_style="drugstore retail environment with health and beauty aisles and pharmacy section",
    ),
    page(
        "walgreens-liquidation", "Walgreens", "retailer",
        keywords=["walgreens liquidation", "walgreens pallets", "drugstore liquidation"],
        angles=[
            ("hba", "Health & Beauty", 0.95, ["beauty products", "personal care", "skincare", "cosmetics"]),
            ("health", "Health Products", 0.9, ["vitamins", "wellness products", "first aid", "health devices"]),
            ("gm", "General Merchandise", 0.8, ["convenience items", "snacks", "household goods", "seasonal"]),
        ],
        related_terms=["health beauty", "wellness", "personal care", "vitamins", "pharmacy retail", "convenience"],
        specific_terms=["Balance Rewards returns", "photo services overstock", "seasonal reset inventory", "store conversion liquidation"],
        image_style="drugstore interior with health and beauty products and pharmacy counter",
    ),
]
