"""Legacy math markup to LaTeX conversion.

Older content was authored with a tool that encoded inline math as HTML
``<sub>``/``<sup>`` tags with underscore markers around the operands, e.g.
``_<sub>_x_</sub>``. This module rewrites that notation into LaTeX delimited by
``$...$`` so a markdown+math renderer can display it.

The conversion is an ordered pipeline of pure text-to-text stages. Order
matters: each stage assumes the shapes earlier stages produce (or remove).
The pipeline never raises; anything it does not recognise passes through.

It is not idempotent. Running it on its own output can rewrite text again,
for instance when entity-escaped tags (``&lt;sub&gt;``) are decoded by the
last stages and then matched as real tags on the next run.
"""

import re
from dataclasses import dataclass
from typing import Callable

TextTransform = Callable[[str], str]


@dataclass(frozen=True)
class MarkupStage:
    """One named step of the conversion pipeline.

    Attributes:
        name: Short identifier, used in traces and tests
        summary: What the stage expects and what it leaves behind
        apply: The text-to-text transform
    """

    name: str
    summary: str
    apply: TextTransform


def _substitutions(*rules: tuple[str, str]) -> TextTransform:
    """Build a transform applying regex substitutions in order."""
    compiled = [(re.compile(pattern), replacement) for pattern, replacement in rules]

    def transform(text: str) -> str:
        for pattern, replacement in compiled:
            text = pattern.sub(replacement, text)
        return text

    return transform


def _literals(mapping: dict[str, str]) -> TextTransform:
    """Build a transform replacing literal characters."""

    def transform(text: str) -> str:
        for source, target in mapping.items():
            text = text.replace(source, target)
        return text

    return transform


GREEK_LETTERS = {
    "α": r"\alpha",
    "β": r"\beta",
    "γ": r"\gamma",
    "δ": r"\delta",
    "ε": r"\epsilon",
    "θ": r"\theta",
    "λ": r"\lambda",
    "μ": r"\mu",
    "π": r"\pi",
    "σ": r"\sigma",
    "τ": r"\tau",
    "φ": r"\phi",
    "ϕ": r"\phi",
    "ω": r"\omega",
}

OPERATORS = {
    "×": r"\times",
    "≈": r"\approx",
    "→": r"\rightarrow",
    "≤": r"\leq",
    "≥": r"\geq",
    "−": "-",  # U+2212 minus sign
}

HTML_ENTITIES = {
    "&nbsp;": " ",
    "&amp;": "&",
    "&lt;": "<",
    "&gt;": ">",
}


DOT_NOTATION = MarkupStage(
    name="dot_notation",
    summary=(
        "Time derivatives spread over several tags, e.g. "
        "_<sub>_x_</sub>_<sub>˙(</sub>_<sub>_t_</sub>_<sub>)</sub>, "
        "become $\\dot{x}(t)$. Runs before any single-tag rule splits them up."
    ),
    apply=_substitutions(
        (
            r"_<sub>_([a-zA-Z])_</sub>_<sub>˙\(</sub>_<sub>_([a-z])_</sub>_<sub>\)</sub>",
            r"$\\dot{\1}(\2)$",
        ),
        (
            r"_<sub>_([A-Z])_</sub>_<sup>˙\s*</sup><sub>\(</sub>_<sub>_([a-z])_</sub>_<sub>\)</sub>",
            r"$\\dot{\1}(\2)$",
        ),
        (
            r"_<sub>_([A-Z])_</sub>_<sup>˙\s*</sup>\(_<sub>_([a-z])_</sub>_\)",
            r"$\\dot{\1}(\2)$",
        ),
    ),
)

FRACTIONS = MarkupStage(
    name="fractions",
    summary=(
        "A <sup> immediately followed by a <sub> is numerator over "
        "denominator: $\\frac{num}{den}$. Must run before bare sub/sup."
    ),
    apply=_substitutions(
        (r"_<sup>_([^<]+)_</sup><sub>_([^<]+)_</sub>", r"$\\frac{\1}{\2}$"),
        (r"<sup>_?([^<]+)_?</sup><sub>_?([^<]+)_?</sub>", r"$\\frac{\1}{\2}$"),
    ),
)

SUBSCRIPTS = MarkupStage(
    name="subscripts",
    summary="Remaining <sub>x</sub> (optionally underscore-marked) becomes _{x}.",
    apply=_substitutions((r"_?<sub>_?([^<]+)_?</sub>", r"_{\1}")),
)

SUPERSCRIPTS = MarkupStage(
    name="superscripts",
    summary="Remaining <sup>x</sup> (optionally underscore-marked) becomes ^{x}.",
    apply=_substitutions((r"_?<sup>_?([^<]+)_?</sup>", r"^{\1}")),
)

UNDERSCORE_CLEANUP = MarkupStage(
    name="underscore_cleanup",
    summary="Strips leftover underscore markers just inside _{...} and ^{...}.",
    apply=_substitutions(
        (r"_\{_+([^}]+)_+\}", r"_{\1}"),
        (r"\^\{_+([^}]+)_+\}", r"^{\1}"),
        (r"_\{([^}]*)_\}", r"_{\1}"),
        (r"\^\{([^}]*)_\}", r"^{\1}"),
    ),
)

GREEK = MarkupStage(
    name="greek",
    summary="Greek glyphs become LaTeX macros (α -> \\alpha).",
    apply=_literals(GREEK_LETTERS),
)

OPERATOR_SYMBOLS = MarkupStage(
    name="operators",
    summary="Operator glyphs become LaTeX (× -> \\times); U+2212 becomes '-'.",
    apply=_literals(OPERATORS),
)

WHITESPACE = MarkupStage(
    name="whitespace",
    summary="Any whitespace run becomes a single space.",
    apply=_substitutions((r"\s+", " ")),
)

MATH_MODE = MarkupStage(
    name="math_mode",
    summary=(
        "A letter carrying _{...} and/or ^{...} is wrapped in $...$ unless the "
        "preceding character is '$'. Combined sub+sup is tried first so it is "
        "not split by the subscript-only rule. A letter at the very start of "
        "the text has no preceding character and is left alone."
    ),
    apply=_substitutions(
        (r"([^$])([a-zA-Z])\s*_\{([^}]+)\}\s*\^\{([^}]+)\}", r"\1$\2_{\3}^{\4}$"),
        (r"([^$])([a-zA-Z])\s*_\{([^}]+)\}", r"\1$\2_{\3}$"),
        (r"([^$])([a-zA-Z])\s*\^\{([^}]+)\}", r"\1$\2^{\3}$"),
    ),
)

STANDALONE_MATH = MarkupStage(
    name="standalone_math",
    summary=(
        "Wraps '\\dot{X}(Y) =' and '(A - B)' in $...$ when not already "
        "preceded by '$'."
    ),
    apply=_substitutions(
        (r"([^$])\\dot\{([^}]+)\}\(([^)]+)\)\s*=", r"\1$\\dot{\2}(\3) =$"),
        (r"([^$])\(([A-Za-z])\s*-\s*([A-Za-z\\]+)\)", r"\1$(\2 - \3)$"),
    ),
)

DOLLAR_CLEANUP = MarkupStage(
    name="dollar_cleanup",
    summary="Three or more '$' collapse to '$$'; '$ $' becomes '$$'.",
    apply=_substitutions(
        (r"\$\$\$+", "$$"),
        (r"\$\s+\$", "$$"),
    ),
)

ENTITIES = MarkupStage(
    name="entities",
    summary="Decodes &nbsp; &amp; &lt; &gt; in that order.",
    apply=_literals(HTML_ENTITIES),
)

TRIM = MarkupStage(
    name="trim",
    summary="Strips leading and trailing whitespace.",
    apply=str.strip,
)


LEGACY_MATH_PIPELINE: tuple[MarkupStage, ...] = (
    DOT_NOTATION,
    FRACTIONS,
    SUBSCRIPTS,
    SUPERSCRIPTS,
    UNDERSCORE_CLEANUP,
    GREEK,
    OPERATOR_SYMBOLS,
    WHITESPACE,
    MATH_MODE,
    STANDALONE_MATH,
    DOLLAR_CLEANUP,
    ENTITIES,
    TRIM,
)


def transform_legacy_math(
    text: str, stages: tuple[MarkupStage, ...] = LEGACY_MATH_PIPELINE
) -> str:
    """Convert legacy sub/sup math markup to LaTeX-annotated markdown.

    Args:
        text: Raw authored text
        stages: Pipeline to run (defaults to the full legacy pipeline)

    Returns:
        Converted text
    """
    for stage in stages:
        text = stage.apply(text)
    return text


def trace_legacy_math(
    text: str, stages: tuple[MarkupStage, ...] = LEGACY_MATH_PIPELINE
) -> list[tuple[str, str]]:
    """Run the pipeline and record the text after every stage.

    Returns:
        List of (stage name, output) pairs in pipeline order
    """
    trace = []
    for stage in stages:
        text = stage.apply(text)
        trace.append((stage.name, text))
    return trace
