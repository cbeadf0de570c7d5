"""
Liquidation industry keyword bank.

Vocabulary handed to the generator so copy uses authentic trade terms.
Retailer and category lists are keyed by a normalized slug, see
retailer_key() and category_key().
"""

GENERAL = [
    "liquidation merchandise", "wholesale inventory", "bulk purchasing", "overstock deals",
    "clearance inventory", "reseller opportunity", "secondary market", "closeout merchandise",
    "surplus goods", "discount inventory", "wholesale liquidation", "pallet loads",
    "truckload deals", "verified suppliers", "direct sourcing",
]

INVENTORY_TYPES = [
    "customer returns", "overstock", "surplus", "shelf pulls", "closeouts", "salvage",
    "open box", "as-is", "uninspected", "tested working", "refurbished", "like-new",
    "grade-A", "grade-B", "grade-C", "mixed condition", "retail ready", "new in box",
    "damaged packaging", "cosmetic imperfections",
]

LOT_FORMATS = [
    "manifested", "unmanifested", "blind loads", "high piece count", "HPC", "case pack",
    "case lot", "master carton", "pallet lot", "gaylord", "truckload", "FTL", "LTL",
    "half truckload", "full truckload", "mixed pallet", "category-specific pallet",
    "sorted loads", "unsorted loads", "raw loads",
]

LOGISTICS = [
    "dock-high", "liftgate delivery", "appointment delivery", "freight", "BOL",
    "bill of lading", "pallet count", "floor-loaded", "palletized", "warehouse pickup",
    "will-call", "FOB origin", "FOB destination", "prepaid freight", "collect freight",
    "shrink-wrapped", "stretch-wrapped", "stacked pallets", "4-way pallets",
    "standard pallet", "48x40 pallet",
]

BUYER_INTENTS = [
    "bin store inventory", "discount store inventory", "Whatnot sellers", "eBay resellers",
    "Amazon FBA sellers", "export buyers", "container buyers", "storefront resellers",
    "online resellers", "flea market vendors", "swap meet vendors", "thrift store buyers",
    "pawn shop inventory", "auction house buyers", "wholesale dealers",
]

QUALITY_TERMS = [
    "condition grading", "functionality testing", "power-on verified", "cosmetic inspection",
    "accessory verification", "packaging condition", "manifest accuracy", "item-level detail",
    "SKU-level manifest", "recovery rate", "yield percentage", "sell-through rate",
    "defect rate", "return rate", "authentication",
]

PROFIT_TERMS = [
    "profit margins", "ROI potential", "below wholesale pricing", "cents on the dollar",
    "50-90% off retail", "competitive sourcing", "resale value", "recovery potential",
    "margin optimization", "cost per unit", "landed cost", "all-in cost", "price per piece",
    "average selling price", "ASP",
]

RETAILER_SPECIFIC = {
    "amazon": [
        "FBA liquidation", "FC returns", "fulfillment center", "LPN", "license plate number",
        "Amazon Smalls", "Amazon Mediums", "Amazon Monsters", "non-sortable", "sortable",
        "Prime returns", "Warehouse Deals", "HD loads", "high-density",
        "customer return pallets", "FBM inventory",
    ],
    "walmart": [
        "GM truckloads", "general merchandise", "shelf pulls", "supercenter overstock",
        "dot-com returns", "store reset", "planogram changes", "regional DC",
        "distribution center", "store-level returns", "neighborhood market",
    ],
    "target": [
        "Target returns", "Target overstock", "Target salvage", "unsorted loads", "raw loads",
        "case pack clothing", "Target private label", "Target+ marketplace", "seasonal bulge",
        "owned brand",
    ],
    "homedepot": [
        "HD tool liquidation", "contractor returns", "Pro Desk", "tool rental returns",
        "special order cancellations", "lighting fixtures", "plumbing supplies",
        "building materials", "seasonal outdoor",
    ],
    "lowes": [
        "Kobalt tools", "Craftsman liquidation", "garden center", "outdoor power equipment",
        "installation returns", "appliance returns", "seasonal clearance",
    ],
    "bestbuy": [
        "electronics returns", "Geek Squad returns", "open box items", "display models",
        "Total Tech returns", "discontinued SKUs", "gaming inventory", "appliance liquidation",
    ],
    "costco": [
        "membership returns", "Kirkland Signature", "bulk item returns", "executive member",
        "Business Center", "warehouse club", "organic closeouts",
    ],
}

CATEGORY_SPECIFIC = {
    "electronics": [
        "tested working", "factory sealed", "open-box tested", "data wiped", "factory reset",
        "accessories included", "charger present", "original packaging", "smart home devices",
        "wearables", "gaming consoles", "peripherals",
    ],
    "tools": [
        "battery included", "charger present", "cordless complete", "bare tool", "combo kit",
        "motor tested", "trigger verified", "20V MAX", "18V system", "professional-grade",
        "contractor-grade", "DIY tools",
    ],
    "apparel": [
        "NWT", "new with tags", "NWOT", "new without tags", "size runs", "size curve",
        "seasonal styles", "brand mix", "case pack clothing", "sorted by category",
        "fashion cycles", "off-season",
    ],
    "furniture": [
        "scratch and dent", "assembly required", "RTA furniture", "hardware included",
        "box condition", "oversized shipping", "white glove delivery", "upholstered",
        "case goods", "outdoor patio",
    ],
    "grocery": [
        "best-by date", "expiration date", "short-dated", "long-dated", "shelf-stable",
        "ambient temperature", "date-coded", "lot codes", "FDA compliant", "salvage food",
        "closeout grocery",
    ],
    "beauty": [
        "sealed products", "lot codes", "manufacturing date", "shelf life", "authentic",
        "brand verification", "prestige beauty", "mass market", "color cosmetics", "skincare",
        "haircare", "fragrance",
    ],
}

# Order the generic groups are merged in for a page prompt
PAGE_GROUPS = [GENERAL, INVENTORY_TYPES, LOT_FORMATS, BUYER_INTENTS, QUALITY_TERMS, PROFIT_TERMS]


def _dedupe(terms) -> list:
    """Drop repeats, keep first occurrence order."""
    return list(dict.fromkeys(terms))


def retailer_key(slug: str) -> str:
    """home-depot-liquidation -> homedepot"""
    return slug.lower().replace("-liquidation", "").replace("-", "")


def category_key(slug: str) -> str:
    """electronics-pallets -> electronics"""
    key = slug.lower()
    for suffix in ("-liquidation", "-pallets", "-wholesale"):
        key = key.replace(suffix, "")
    return key


def get_all_keywords() -> list:
    """Every term in the bank as one flat, deduplicated list."""
    terms = []
    for group in PAGE_GROUPS:
        terms.extend(group)
    terms.extend(LOGISTICS)
    for group in RETAILER_SPECIFIC.values():
        terms.extend(group)
    for group in CATEGORY_SPECIFIC.values():
        terms.extend(group)
    return _dedupe(terms)


def get_keywords_for_page(slug: str, page_type: str) -> list:
    """
    Relevant vocabulary for one page.

    Generic groups plus any retailer- or category-specific list matching the
    slug, with logistics last. Unknown slugs get the generic vocabulary only.
    page_type is accepted for callers that filter by it; lookup is by slug.
    """
    terms = []
    for group in PAGE_GROUPS:
        terms.extend(group)

    terms.extend(RETAILER_SPECIFIC.get(retailer_key(slug), []))
    terms.extend(CATEGORY_SPECIFIC.get(category_key(slug), []))

    terms.extend(LOGISTICS)
    return _dedupe(terms)
