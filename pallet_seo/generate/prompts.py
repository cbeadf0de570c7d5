"""Prompt builders for page content generation."""

from pallet_seo.config import MAX_AVOID_PHRASES, MAX_PROMPT_KEYWORDS
from pallet_seo.pages.models import PageDefinition


def build_system_prompt() -> str:
    """Build the system instruction shared by every page."""
    return """You are an expert SEO content writer specializing in the liquidation and wholesale industry. You have deep knowledge of:

- Liquidation terminology: manifested vs unmanifested, HPC (high piece count), shelf pulls, customer returns, overstock, salvage
- Lot formats: pallets, truckloads, FTL/LTL, gaylords, case packs, mixed loads
- Logistics: dock-high, liftgate delivery, freight terms, BOL, warehouse pickup
- Buyer segments: bin stores, eBay/Amazon resellers, Whatnot sellers, flea market vendors, discount stores
- Retailer-specific terms: Amazon (FC, LPN, Smalls, Mediums), Walmart (GM truckloads, shelf pulls), Target (raw loads, case pack)
- Quality grading: Grade A/B/C, tested working, as-is, uninspected

Your content demonstrates genuine expertise and avoids generic marketing language. You write for resellers and wholesale buyers who understand the industry.

CRITICAL RULES:
1. Never repeat the same phrases across different pages
2. Each piece of content must be genuinely unique
3. Use industry-specific terminology correctly and naturally, not stuffed
4. Focus on practical buyer value, not hype or filler
5. Always output valid JSON only - no markdown, no explanation"""


def _format_angles(page: PageDefinition) -> str:
    return "; ".join(f"{a.name} ({', '.join(a.phrases[:2])})" for a in page.angles)


def build_user_prompt(page: PageDefinition, avoid_phrases: list, keywords: list) -> str:
    """
    Build the per-page instruction.

    avoid_phrases and keywords are truncated to MAX_AVOID_PHRASES and
    MAX_PROMPT_KEYWORDS entries.
    """
    avoid_lines = "\n".join(f'- "{p}"' for p in avoid_phrases[:MAX_AVOID_PHRASES])
    if not avoid_lines:
        avoid_lines = "- (none yet)"

    specific = ""
    if page.specific_terms:
        specific = f"\n- **Specific Industry Terms:** {', '.join(page.specific_terms)}"

    return f"""Generate SEO content for the "{page.display_name}" liquidation page ({page.slug}).

## Page Context
- **Page Type:** {page.page_type}
- **Primary Keywords:** {', '.join(page.keywords)}
- **Angles to Emphasize:** {_format_angles(page)}
- **Related Terms:** {', '.join(page.related_terms)}{specific}
- **Image Style:** {page.image_style}

## AVOID These Phrases (already used on other pages)
{avoid_lines}

## Industry Keyword Bank (use naturally, don't stuff)
{', '.join(keywords[:MAX_PROMPT_KEYWORDS])}

## Generate the following (output as JSON object):

{{
  "metaDescription": "120-160 characters. Focus on buyer value and key differentiators.",
  "heroText": "60-120 words. What makes this liquidation source valuable to resellers. Include lot types available.",
  "featuredSuppliersText": "40-60 words. Brief intro to why these suppliers are recommended for this type of inventory.",
  "centeredValueH2": "Short, compelling H2 heading (5-10 words) about the value proposition.",
  "centeredValueText": "80-120 words. Deep industry insight about pricing factors, condition variance, or ROI drivers for this type.",
  "contentBlocks": [
    {{
      "h2": "Compelling section heading about sourcing or quality",
      "text": "90-160 words with NEW industry terminology. Cover lot formats, grading, or buyer considerations.",
      "image_prompt": "Detailed prompt for AI image generation showing this type of merchandise in a warehouse setting",
      "image_alt": "SEO-optimized alt tag (8-15 words) describing the specific merchandise",
      "layout_type": "image_left"
    }},
    {{
      "h2": "Different angle - logistics, buyer types, or market opportunity",
      "text": "90-160 words. Different focus than block 1. Cover freight, buyer segments, or profit potential.",
      "image_prompt": "Different visual angle than block 1",
      "image_alt": "SEO-optimized alt tag with different focus than block 1",
      "layout_type": "image_right"
    }}
  ],
  "faqSectionH2": "{page.display_name} Liquidation FAQ",
  "faqs": [
    {{"question": "Industry-specific question about sourcing", "answer": "60-120 words with practical advice and terminology"}},
    {{"question": "Question about lot types or formats", "answer": "60-120 words"}},
    {{"question": "Question about condition or grading", "answer": "60-120 words"}},
    {{"question": "Question about pricing or ROI", "answer": "60-120 words"}},
    {{"question": "Question about logistics or receiving", "answer": "60-120 words"}},
    {{"question": "Question about best practices or buyer types", "answer": "60-120 words"}},
    {{"question": "Question about verification or manifests", "answer": "60-120 words"}},
    {{"question": "Advanced question for experienced buyers", "answer": "60-120 words with pro-level insights"}}
  ]
}}

IMPORTANT: Output ONLY the JSON object. No markdown formatting, no explanation before or after."""
