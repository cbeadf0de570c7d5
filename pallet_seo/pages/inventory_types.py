"""Buyer-focused inventory type pages (10)."""

from pallet_seo.pages.models import page

INVENTORY_TYPES = [
    page(
        "bin-store-inventory", "Bin Store", "inventory",
        keywords=["bin store inventory", "bin store pallets", "high piece count inventory", "discount bin merchandise"],
        angles=[
            ("hpc", "High Piece Count", 0.95, ["high piece count", "HPC loads", "volume inventory", "unit-heavy pallets"]),
            ("turnover", "Inventory Turnover", 0.9, ["daily restocks", "fast turnover", "price drops", "fresh inventory"]),
            ("treasure-hunt", "Treasure Hunt Model", 0.85, ["treasure hunt shopping", "discovery retail", "surprise finds", "bargain hunting"]),
        ],
        related_terms=["HPC", "gaylord bins", "daily deals", "rotating stock", "discount retail", "price tiers"],
        specific_terms=["$1 bins", "price drop model", "day-of-week pricing", "floor inventory", "dump bins"],
        image_style="colorful retail bins filled with assorted merchandise in a discount store setting",
    ),
    page(
        "whatnot-inventory", "Whatnot", "inventory",
        keywords=["whatnot inventory", "live auction inventory", "whatnot sellers", "live selling pallets"],
        angles=[
            ("live-selling", "Live Selling", 0.95, ["live auction format", "real-time bidding", "interactive selling", "stream-friendly"]),
            ("unboxing", "Unboxing Appeal", 0.9, ["mystery appeal", "unboxing content", "visual excitement", "reveal moments"]),
            ("shipping", "Shipping Friendly", 0.85, ["small form factor", "easy shipping", "package-ready", "lightweight items"]),
        ],
        related_terms=["live streaming", "mystery lots", "auction format", "reseller community", "small items", "fast-moving"],
        specific_terms=["break-style selling", "lot breaks", "category shows", "smalls-heavy loads", "camera-ready"],
        image_style="live streaming setup with ring light, camera, and merchandise ready for auction",
    ),
    page(
        "ebay-reseller-inventory", "eBay Reseller", "inventory",
        keywords=["ebay reseller inventory", "ebay seller pallets", "online reseller inventory"],
        angles=[
            ("manifested", "Manifested Loads", 0.95, ["manifested pallets", "itemized inventory", "SKU-level detail", "pricing data"]),
            ("brands", "Gated Brands", 0.9, ["brand gating", "ungated items", "brand restrictions", "authorization required"]),
            ("listing", "Listing Prep", 0.85, ["listing-ready", "photo-ready", "condition grading", "item research"]),
        ],
        related_terms=["manifested", "brand gating", "listing optimization", "condition grading", "profit margin", "sell-through"],
        specific_terms=["auction-style", "Buy It Now ready", "category restrictions", "authentication eligible", "VeRO compliant"],
        image_style="home reselling workspace with computer, shipping supplies, and inventory shelves",
    ),
    page(
        "amazon-fba-liquidation", "Amazon FBA", "inventory",
        keywords=["amazon fba liquidation", "fba inventory", "fba-ready pallets", "amazon seller inventory"],
        angles=[
            ("prep", "FBA Prep Requirements", 0.95, ["FBA prep", "labeling requirements", "poly bagging", "bundling rules"]),
            ("restrictions", "Category Restrictions", 0.9, ["gated categories", "restricted brands", "approval required", "ungated items"]),
            ("sizing", "FBA Sizing Tiers", 0.85, ["standard size", "oversize items", "sortable inventory", "non-sortable"]),
        ],
        related_terms=["FBA prep", "gated categories", "sortable", "oversize", "FNSKU", "inbound shipping"],
        specific_terms=["prep center ready", "merchant fulfilled alternative", "commingled vs labeled", "IPI score friendly"],
        image_style="FBA prep center with labeling station, poly bags, and organized inventory",
    ),
    page(
        "discount-store-inventory", "Discount Store", "inventory",
        keywords=["discount store inventory", "dollar store pallets", "surplus store inventory"],
        angles=[
            ("price-points", "Price Point Strategy", 0.9, ["fixed price points", "dollar store pricing", "margin maintenance", "cost optimization"]),
            ("variety", "Category Variety", 0.85, ["multi-category mix", "household essentials", "everyday items", "impulse buys"]),
            ("volume", "Volume Purchasing", 0.8, ["bulk buying", "truckload quantities", "consistent supply", "repeat orders"]),
        ],
        related_terms=["fixed price", "dollar store", "surplus", "closeouts", "essentials", "impulse items"],
        specific_terms=["$1.25 price point", "multi-price format", "basket builders", "checkout impulse"],
        image_style="discount retail store interior with organized shelves of everyday merchandise",
    ),
    page(
        "flea-market-pallets", "Flea Market", "inventory",
        keywords=["flea market pallets", "flea market inventory", "swap meet merchandise"],
        angles=[
            ("variety", "Product Variety", 0.9, ["mixed merchandise", "treasure hunt", "diverse inventory", "eclectic mix"]),
            ("pricing", "Flexible Pricing", 0.85, ["negotiation ready", "cash sales", "deal-making", "bundle pricing"]),
            ("transport", "Easy Transport", 0.8, ["vehicle-friendly", "setup ease", "pack and go", "display-ready"]),
        ],
        related_terms=["swap meet", "outdoor market", "vendor inventory", "cash business", "weekend sales", "booth setup"],
        specific_terms=["canopy-friendly", "table display items", "haggle-proof pricing", "weather considerations"],
        image_style="flea market booth with diverse merchandise display and vendor setup",
    ),
    page(
        "grocery-store-liquidation-inventory", "Grocery Store", "inventory",
        keywords=["grocery store inventory", "grocery liquidation", "food store pallets"],
        angles=[
            ("expiration", "Date Management", 0.95, ["date-coded", "shelf life planning", "rotation strategy", "best-by tracking"]),
            ("compliance", "Food Safety", 0.9, ["food safety", "storage requirements", "temperature control", "handling protocols"]),
            ("categories", "Grocery Categories", 0.85, ["dry goods", "beverages", "snacks", "canned goods", "pantry staples"]),
        ],
        related_terms=["food liquidation", "date-coded", "salvage grocery", "CPG closeouts", "shelf-stable"],
        specific_terms=["grocery salvage", "damaged packaging", "label changes", "discontinued items", "seasonal food"],
        image_style="grocery liquidation warehouse with food pallets organized by category",
    ),
    page(
        "returns-pallets", "Returns", "inventory",
        keywords=["returns pallets", "customer returns liquidation", "retail returns wholesale"],
        angles=[
            ("grading", "Condition Grading", 0.95, ["condition grades", "grade-A returns", "tested working", "as-is lots"]),
            ("manifests", "Manifest Accuracy", 0.9, ["manifested returns", "item-level detail", "manifest verification", "SKU accuracy"]),
            ("sources", "Return Sources", 0.85, ["online returns", "in-store returns", "buyer remorse", "defective returns"]),
        ],
        related_terms=["customer returns", "graded returns", "manifested", "unmanifested", "salvage", "as-is"],
        specific_terms=["Grade A", "Grade B", "Grade C", "uninspected", "tested functional", "shelf pulls mix"],
        image_style="returns processing center with grading stations and organized pallets",
    ),
    page(
        "overstock-liquidation", "Overstock", "inventory",
        keywords=["overstock liquidation", "overstock pallets", "excess inventory wholesale", "closeout merchandise"],
        angles=[
            ("new-condition", "New Condition", 0.95, ["brand new", "never sold", "retail ready", "original packaging"]),
            ("seasonal", "Seasonal Overstock", 0.9, ["seasonal excess", "holiday overstock", "off-season deals", "timing opportunities"]),
            ("closeouts", "Closeout Deals", 0.85, ["discontinued SKUs", "packaging changes", "brand transitions", "store closings"]),
        ],
        related_terms=["brand new", "excess inventory", "closeouts", "seasonal", "discontinued", "packaging changes"],
        specific_terms=["planogram changes", "store reset overstock", "forecast excess", "promotional leftovers"],
        image_style="warehouse with new-in-box overstock merchandise organized on pallets",
    ),
    page(
        "wholesale-pallets", "Wholesale", "inventory",
        keywords=["wholesale pallets", "bulk liquidation", "wholesale truckloads", "bulk merchandise"],
        angles=[
            ("volume", "Volume Discounts", 0.9, ["bulk pricing", "volume discounts", "truckload savings", "scale economics"]),
            ("variety", "Category Variety", 0.85, ["multi-category", "assorted merchandise", "mixed loads", "diverse inventory"]),
            ("suppliers", "Supplier Network", 0.8, ["verified suppliers", "direct sourcing", "consistent supply", "relationship building"]),
        ],
        related_terms=["bulk buying", "truckload", "LTL", "volume pricing", "wholesale suppliers", "B2B"],
        specific_terms=["minimum orders", "MOQ", "freight terms", "payment terms", "repeat buyer programs"],
        image_style="large wholesale warehouse with full truckload quantities and diverse merchandise",
    ),
]
