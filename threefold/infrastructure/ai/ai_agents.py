from pydantic import BaseModel, Field
from pydantic_ai import Agent

from threefold.infrastructure.ai.ai_model import get_ai_model


class FlashcardDraft(BaseModel):
    hints: str = Field(description="1-3 sentences that guide without giving the answer away")
    proof: str = Field(description="Complete step-by-step proof")
    tags: list[str] = Field(description="3-6 lowercase mathematical topic tags")


def get_autofill_agent() -> Agent[None, FlashcardDraft]:
    return Agent(
        get_ai_model(),
        output_type=FlashcardDraft,
        instructions="""
        You are a mathematics tutor and LaTeX expert. You will receive a mathematical
        statement that may contain LaTeX notation. Write study material for it:

        hints: 1-3 sentences of guidance that do not give the answer away.
        proof: a complete, step-by-step proof structured as
            Given, Method, numbered Steps, Therefore. Separate the parts with blank lines.
        tags: 3-6 topic tags using standard terminology, lowercase, no duplicates.

        Use $...$ for inline math and $$...$$ for display math throughout.
        If the statement cannot be processed, answer "Unable to process" for hints
        and proof and use the single tag "general".
        """,
    )


def get_latex_agent() -> Agent[None, str]:
    return Agent(
        get_ai_model(),
        output_type=str,
        instructions="""
        Convert natural-language mathematical text into LaTeX notation.
        Output only the converted text with no explanation.

        - Use $...$ for inline expressions and $$...$$ for standalone equations.
        - Keep non-mathematical text, sentence structure and punctuation as they are.
        - Leave anything already written in LaTeX unchanged.
        - Use standard commands: \\sqrt, \\frac, \\int, \\sum, \\lim, \\infty, \\leq, \\geq,
          \\neq, \\approx, \\pm, \\cdot, \\in, \\subset, \\cup, \\cap, \\emptyset, Greek letters
          and \\sin, \\cos, \\tan, \\log, \\ln, \\exp.

        Example: "The derivative of x squared with respect to x is 2x" becomes
        "The derivative of $x^2$ with respect to $x$ is $2x$".
        """,
    )


def get_tags_agent() -> Agent[None, list[str]]:
    return Agent(
        get_ai_model(),
        output_type=list[str],
        instructions="""
        Classify a mathematical statement (which may contain LaTeX) into 3-6 topic tags.

        Use lowercase hyphenated names from standard domains such as algebra, calculus,
        geometry, trigonometry, linear-algebra, differential-equations, complex-analysis,
        topology, number-theory, probability, statistics, discrete-math, graph-theory,
        optimization, real-analysis, abstract-algebra and functional-analysis.
        Prefer specific tags (eigenvalues over algebra). No duplicates, no empty strings.
        If unsure, include general-mathematics.
        """,
    )
