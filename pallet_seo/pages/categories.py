"""Product category pages (14)."""

from pallet_seo.pages.models import page

CATEGORIES = [
    page(
        "general-merchandise-liquidation", "General Merchandise", "category",
        keywords=["general merchandise liquidation", "GM pallets", "mixed merchandise truckloads"],
        angles=[
            ("mixed-loads", "Mixed Category Loads", 0.9, ["mixed GM pallets", "multi-category truckloads", "assorted merchandise"]),
            ("bin-store", "Bin Store Ready", 0.85, ["bin store inventory", "high piece count", "fast-moving items"]),
            ("sorting", "Sorting Workflow", 0.8, ["sort and grade", "category separation", "product organization"]),
        ],
        related_terms=["mixed pallets", "multi-category", "HPC", "assorted goods", "bin store ready", "GM truckloads"],
        specific_terms=["department store mix", "retailer-direct GM", "cross-category pallets", "variety store inventory"],
        image_style="warehouse with diverse merchandise pallets showing multiple product categories",
    ),
    page(
        "electronics-pallets", "Electronics", "category",
        keywords=["electronics pallets", "electronics liquidation", "tech liquidation", "consumer electronics wholesale"],
        angles=[
            ("testing", "Functional Testing", 0.95, ["tested working", "power-on verified", "functionality testing", "grade-A tested"]),
            ("accessories", "Accessory Completeness", 0.85, ["original accessories", "cables included", "chargers present", "box contents"]),
            ("data-security", "Data Security", 0.8, ["factory reset", "data wiped", "account removed", "privacy cleared"]),
        ],
        related_terms=["tested working", "open box", "factory sealed", "accessories", "data wipe", "consumer electronics"],
        specific_terms=["smart home devices", "wearables", "audio equipment", "gaming peripherals", "computer components"],
        image_style="organized electronics warehouse with TVs, laptops, tablets on shelving",
    ),
    page(
        "tools-liquidation", "Tools", "category",
        keywords=["tools liquidation", "power tool pallets", "tool liquidation truckloads", "contractor tools wholesale"],
        angles=[
            ("batteries", "Battery Verification", 0.95, ["battery included", "charger present", "cordless complete", "battery pack condition"]),
            ("brands", "Premium Brands", 0.9, ["DeWalt", "Milwaukee", "Makita", "Ryobi", "Bosch", "professional-grade"]),
            ("testing", "Tool Testing", 0.85, ["motor tested", "trigger verified", "safety checked", "functional inspection"]),
        ],
        related_terms=["power tools", "cordless tools", "hand tools", "batteries", "chargers", "contractor-grade", "professional"],
        specific_terms=["20V MAX systems", "18V cordless", "combo kits", "bare tools", "tool storage", "compressors"],
        image_style="organized tool warehouse with power tools, cordless systems, and hand tools on racks",
    ),
    page(
        "furniture-liquidation", "Furniture", "category",
        keywords=["furniture liquidation", "furniture pallets", "furniture truckloads", "wholesale furniture"],
        angles=[
            ("condition", "Condition Assessment", 0.9, ["scratch and dent", "slight damage", "cosmetic imperfections", "assembly required"]),
            ("freight", "Freight Considerations", 0.85, ["oversized shipping", "LTL freight", "white glove", "dock delivery"]),
            ("assembly", "Assembly Hardware", 0.8, ["hardware included", "assembly instructions", "missing parts", "box condition"]),
        ],
        related_terms=["scratch and dent", "assembly required", "oversized", "RTA furniture", "upholstered", "case goods"],
        specific_terms=["living room sets", "bedroom furniture", "office furniture", "outdoor patio", "mattresses", "accent pieces"],
        image_style="furniture warehouse with sofas, tables, bedroom sets wrapped and organized",
    ),
    page(
        "grocery-liquidation", "Grocery", "category",
        keywords=["grocery liquidation", "food liquidation", "grocery closeouts", "food pallets"],
        angles=[
            ("expiration", "Expiration Management", 0.95, ["best-by dates", "short-dated inventory", "expiration compliance", "date coding"]),
            ("storage", "Storage Requirements", 0.9, ["temperature controlled", "dry storage", "shelf stable", "ambient temperature"]),
            ("compliance", "Regulatory Compliance", 0.85, ["FDA compliant", "labeling requirements", "state regulations", "food safety"]),
        ],
        related_terms=["short-dated", "closeouts", "dry goods", "beverages", "snacks", "canned goods", "CPG"],
        specific_terms=["date-coded inventory", "salvage food", "packaging changes", "formula updates", "seasonal grocery"],
        image_style="food distribution warehouse with dry goods, beverages, and packaged foods on pallets",
    ),
    page(
        "apparel-wholesale", "Apparel", "category",
        keywords=["apparel wholesale", "clothing liquidation", "apparel pallets", "clothing truckloads"],
        angles=[
            ("size-runs", "Size Distribution", 0.95, ["complete size runs", "size curve", "assorted sizes", "size optimization"]),
            ("seasonality", "Seasonal Timing", 0.9, ["seasonal inventory", "off-season discounts", "fashion cycles", "trend timing"]),
            ("sorting", "Sorting Workflow", 0.85, ["sort by category", "brand separation", "size organization", "condition grading"]),
        ],
        related_terms=["NWT", "NWOT", "size runs", "seasonal", "fashion", "brand mix", "case pack clothing"],
        specific_terms=["men's apparel", "women's fashion", "children's clothing", "activewear", "outerwear", "basics"],
        image_style="clothing warehouse with organized racks and boxes of folded apparel by category",
    ),
    page(
        "shoes-wholesale", "Shoes", "category",
        keywords=["shoes wholesale", "footwear liquidation", "shoe pallets", "footwear truckloads"],
        angles=[
            ("pairs", "Pair Verification", 0.95, ["matched pairs", "box condition", "sizing labels", "pair integrity"]),
            ("brands", "Brand Value", 0.9, ["name-brand footwear", "athletic brands", "designer shoes", "brand recognition"]),
            ("categories", "Footwear Categories", 0.85, ["athletic shoes", "dress shoes", "casual footwear", "boots", "sandals"]),
        ],
        related_terms=["matched pairs", "athletic footwear", "dress shoes", "boots", "sandals", "sneakers", "brand-name"],
        specific_terms=["Nike liquidation", "Adidas overstock", "work boots", "children's shoes", "seasonal footwear"],
        image_style="footwear warehouse with shoe boxes organized on shelving by category and brand",
    ),
    page(
        "beauty-liquidation", "Beauty", "category",
        keywords=["beauty liquidation", "cosmetics liquidation", "beauty pallets", "HBA wholesale"],
        angles=[
            ("authenticity", "Authenticity Verification", 0.95, ["authentic products", "brand verification", "counterfeit-free", "authorized sourcing"]),
            ("expiration", "Shelf Life", 0.9, ["lot codes", "manufacturing dates", "shelf life", "expiration awareness"]),
            ("sealed", "Product Integrity", 0.85, ["factory sealed", "unopened", "tamper-evident", "original packaging"]),
        ],
        related_terms=["cosmetics", "skincare", "haircare", "fragrance", "sealed", "lot codes", "prestige beauty"],
        specific_terms=["color cosmetics", "treatment products", "professional haircare", "nail products", "bath and body"],
        image_style="beauty product warehouse with organized cosmetics, skincare, and haircare displays",
    ),
    page(
        "toys-liquidation", "Toys", "category",
        keywords=["toys liquidation", "toy pallets", "toy truckloads", "wholesale toys"],
        angles=[
            ("brands", "Licensed Brands", 0.9, ["licensed toys", "major brands", "character merchandise", "brand recognition"]),
            ("safety", "Safety Compliance", 0.85, ["CPSC compliant", "age-appropriate", "safety tested", "recall verification"]),
            ("seasonal", "Seasonal Demand", 0.8, ["holiday inventory", "seasonal timing", "gift-giving seasons", "birthday demand"]),
        ],
        related_terms=["licensed toys", "action figures", "games", "puzzles", "outdoor toys", "educational", "STEM"],
        specific_terms=["Hasbro products", "Mattel toys", "LEGO liquidation", "plush toys", "ride-on toys", "collectibles"],
        image_style="toy warehouse with colorful packaging and organized displays of games and toys",
    ),
    page(
        "sporting-goods-liquidation", "Sporting Goods", "category",
        keywords=["sporting goods liquidation", "sports equipment pallets", "fitness liquidation"],
        angles=[
            ("fitness", "Fitness Equipment", 0.9, ["gym equipment", "home fitness", "exercise machines", "weights"]),
            ("outdoor", "Outdoor Recreation", 0.85, ["camping gear", "outdoor equipment", "hiking supplies", "fishing gear"]),
            ("team-sports", "Team Sports", 0.8, ["team sports equipment", "balls", "protective gear", "athletic apparel"]),
        ],
        related_terms=["fitness equipment", "outdoor gear", "team sports", "athletic apparel", "camping", "cycling"],
        specific_terms=["home gym equipment", "yoga accessories", "golf equipment", "water sports", "winter sports"],
        image_style="sporting goods warehouse with fitness equipment, outdoor gear, and team sports supplies",
    ),
    page(
        "baby-products-liquidation", "Baby Products", "category",
        keywords=["baby products liquidation", "baby pallets", "baby gear wholesale"],
        angles=[
            ("safety", "Safety Standards", 0.95, ["CPSC compliant", "safety certified", "recall-free", "current standards"]),
            ("gear", "Baby Gear", 0.9, ["strollers", "car seats", "high chairs", "cribs", "nursery furniture"]),
            ("essentials", "Baby Essentials", 0.85, ["diapers", "formula", "feeding supplies", "baby care"]),
        ],
        related_terms=["baby gear", "strollers", "car seats", "nursery", "feeding", "safety certified", "infant care"],
        specific_terms=["travel systems", "baby monitors", "nursing supplies", "baby toys", "clothing 0-24M"],
        image_style="baby products warehouse with strollers, car seats, and nursery items organized",
    ),
    page(
        "automotive-liquidation", "Automotive", "category",
        keywords=["automotive liquidation", "auto parts pallets", "car accessories wholesale"],
        angles=[
            ("accessories", "Car Accessories", 0.9, ["car accessories", "interior accessories", "exterior add-ons", "mobile electronics"]),
            ("parts", "Replacement Parts", 0.85, ["replacement parts", "maintenance items", "filters", "fluids"]),
            ("detailing", "Detailing Products", 0.8, ["car care", "detailing supplies", "cleaning products", "waxes"]),
        ],
        related_terms=["car accessories", "auto parts", "detailing", "car care", "maintenance", "mobile electronics"],
        specific_terms=["floor mats", "seat covers", "phone mounts", "dash cams", "jump starters", "tool kits"],
        image_style="automotive accessories warehouse with car parts, detailing products, and accessories",
    ),
    page(
        "housewares-liquidation", "Housewares", "category",
        keywords=["housewares liquidation", "kitchen pallets", "home goods wholesale"],
        angles=[
            ("kitchen", "Kitchen Items", 0.9, ["kitchenware", "cookware", "bakeware", "kitchen gadgets", "food storage"]),
            ("appliances", "Small Appliances", 0.85, ["small appliances", "countertop appliances", "coffee makers", "blenders"]),
            ("storage", "Home Organization", 0.8, ["storage solutions", "organization", "containers", "shelving"]),
        ],
        related_terms=["kitchenware", "small appliances", "cookware", "storage", "organization", "home essentials"],
        specific_terms=["Instant Pot", "air fryers", "vacuum cleaners", "bedding", "bath accessories", "cleaning supplies"],
        image_style="housewares warehouse with kitchen items, small appliances, and home organization products",
    ),
    page(
        "health-wellness-liquidation", "Health & Wellness", "category",
        keywords=["health wellness liquidation", "wellness pallets", "health products wholesale"],
        angles=[
            ("supplements", "Vitamins & Supplements", 0.9, ["vitamins", "supplements", "wellness products", "nutritional items"]),
            ("fitness", "Fitness Accessories", 0.85, ["fitness accessories", "workout equipment", "yoga supplies", "recovery tools"]),
            ("personal-care", "Personal Care", 0.8, ["personal care", "grooming", "oral care", "skincare"]),
        ],
        related_terms=["vitamins", "supplements", "fitness accessories", "personal care", "wellness", "health devices"],
        specific_terms=["protein supplements", "essential oils", "massage tools", "first aid", "health monitors"],
        image_style="health and wellness warehouse with vitamins, fitness gear, and personal care products",
    ),
]
