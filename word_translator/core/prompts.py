"""
System prompt and sampling temperature construction.

Domains and styles are plain data: adding a domain means adding a table entry.

Temperature priority:
1. Style "strict" - lowest value regardless of domain
2. Style "human" - mid value regardless of domain
3. Domain - domain-appropriate value
4. Fallback - balanced value
"""

from dataclasses import dataclass
from typing import Dict, Optional, Tuple

from .languages import AUTO_DETECT, language_name

DETECTED_MARKER = "DETECTED:"

CASUAL_DOMAIN = "casual"
GENERAL_DOMAIN = "general"

STRICT_STYLE = "strict"
HUMAN_STYLE = "human"
BALANCED_STYLE = "balanced"

STYLE_INSTRUCTIONS: Dict[str, str] = {
    STRICT_STYLE: (
        "Translate literally and precisely. Maintain exact sentence structure. "
        "Use formal terminology."
    ),
    HUMAN_STYLE: (
        "Translate naturally as a native speaker would say it. Prioritize readability "
        "and natural flow over literal accuracy."
    ),
    BALANCED_STYLE: "Balance accuracy with natural language. Keep it professional but readable.",
}

CASUAL_PROMPT = (
    "Translate conversationally like a native speaker in everyday language. Make it sound "
    "natural and friendly, as if texting or chatting. Use colloquial expressions when appropriate."
)

GENERIC_PROMPT = "You are a professional translator."

DOMAIN_PROMPTS: Dict[str, str] = {
    "legal": (
        "You are a certified legal translator. Use precise legal terminology. Preserve structure "
        "and formatting exactly. Keep all article numbers, dates, names, and IDs unchanged."
    ),
    "certificate": (
        "Translate in official government certificate style. Keep names, numbers, dates, seals, "
        "and stamps unchanged. Use formal government language."
    ),
    "bank": (
        "Translate using formal banking and financial terminology. Keep account numbers, amounts, "
        "dates, and reference codes unchanged. Use standard banking language."
    ),
    "medical": (
        "Translate medical reports using accurate medical terminology. Keep patient names, dates, "
        "test results, and measurements unchanged. Maintain clinical precision."
    ),
    "academic": (
        "Translate academic documents with scholarly terminology. Keep citations, dates, names, "
        "and numerical data unchanged. Maintain academic tone."
    ),
    "business": (
        "Translate business contracts and documents using formal business language. Keep company "
        "names, dates, amounts, and clause numbers unchanged."
    ),
    "technical": (
        "Translate technical manuals using precise technical terminology. Keep model numbers, "
        "specifications, measurements, and codes unchanged."
    ),
    "government": (
        "Translate official government documents using formal administrative language. Keep all "
        "reference numbers, dates, names, and official codes unchanged."
    ),
}

PRESERVE_INSTRUCTION = (
    "IMPORTANT: Preserve all numbers, dates, IDs, and proper names exactly as they appear. "
    "Return ONLY the translated text without any explanations."
)

STRICT_TEMPERATURE = 0.1
PRECISE_TEMPERATURE = 0.15
FLEXIBLE_TEMPERATURE = 0.2
BALANCED_TEMPERATURE = 0.3
NATURAL_TEMPERATURE = 0.4

STYLE_TEMPERATURES: Dict[str, float] = {
    STRICT_STYLE: STRICT_TEMPERATURE,
    HUMAN_STYLE: NATURAL_TEMPERATURE,
}

DOMAIN_TEMPERATURES: Dict[str, float] = {
    "legal": PRECISE_TEMPERATURE,
    "certificate": PRECISE_TEMPERATURE,
    "bank": PRECISE_TEMPERATURE,
    "medical": PRECISE_TEMPERATURE,
    "government": PRECISE_TEMPERATURE,
    "academic": FLEXIBLE_TEMPERATURE,
    "business": FLEXIBLE_TEMPERATURE,
    "technical": FLEXIBLE_TEMPERATURE,
    CASUAL_DOMAIN: NATURAL_TEMPERATURE,
}

DOMAINS = (GENERAL_DOMAIN,) + tuple(DOMAIN_PROMPTS) + (CASUAL_DOMAIN,)
STYLES = tuple(STYLE_INSTRUCTIONS)


@dataclass(frozen=True)
class TranslationRequest:
    """One translation call, built per action and discarded afterwards."""
    text: str
    source_language: str
    target_language: str
    domain: str = GENERAL_DOMAIN
    style: str = BALANCED_STYLE
    model: str = "gpt-4.1"

    @property
    def is_auto_detect(self) -> bool:
        return self.source_language == AUTO_DETECT


@dataclass(frozen=True)
class PromptSpec:
    """System instruction and sampling temperature derived from a request."""
    system_prompt: str
    temperature: float


def build_system_prompt(source_language: str, target_name: str, domain: str, style: str) -> str:
    """Build the system instruction for a translation.

    Args:
        source_language: Source language code or "auto"
        target_name: English name of the target language
        domain: Domain tag; unknown tags use the generic prompt
        style: Style tag; unknown tags behave as balanced

    Returns:
        Instruction string containing the target language name
    """
    if domain == CASUAL_DOMAIN:
        # Casual ignores the style qualifier
        base_prompt = CASUAL_PROMPT
    else:
        style_instructions = STYLE_INSTRUCTIONS.get(style, STYLE_INSTRUCTIONS[BALANCED_STYLE])
        base_prompt = f"{DOMAIN_PROMPTS.get(domain, GENERIC_PROMPT)} {style_instructions}"

    if source_language == AUTO_DETECT:
        return (
            f"{base_prompt} Detect the source language and translate to {target_name}. "
            f"{PRESERVE_INSTRUCTION} At the very end, on a new line, write \"{DETECTED_MARKER}\" "
            f"followed by the detected language name in English."
        )

    source_name = language_name(source_language)
    return f"{base_prompt} Translate from {source_name} to {target_name}. {PRESERVE_INSTRUCTION}"


def select_temperature(style: str, domain: str) -> float:
    """Pick the sampling temperature for a style and domain."""
    if style in STYLE_TEMPERATURES:
        return STYLE_TEMPERATURES[style]
    return DOMAIN_TEMPERATURES.get(domain, BALANCED_TEMPERATURE)


def build_prompt_spec(request: TranslationRequest) -> PromptSpec:
    """Derive the system prompt and temperature for a request."""
    target_name = language_name(request.target_language)
    return PromptSpec(
        system_prompt=build_system_prompt(
            request.source_language, target_name, request.domain, request.style
        ),
        temperature=select_temperature(request.style, request.domain)
    )


def split_detected_language(text: str) -> Tuple[str, Optional[str]]:
    """Split a trailing detected-language marker off a reply.

    Returns:
        (translation, detected language or None when no marker is present)
    """
    if DETECTED_MARKER not in text:
        return text.strip(), None

    translation, _, detected = text.rpartition(DETECTED_MARKER)
    return translation.strip(), detected.strip() or None
