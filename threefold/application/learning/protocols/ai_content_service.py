from dataclasses import dataclass
from typing import Protocol


@dataclass(frozen=True)
class AutofillContent:
    hints: str
    proof: str
    tags: list[str]


class AIContentServiceProtocol(Protocol):
    async def autofill(self, statement: str) -> AutofillContent: ...

    async def convert_to_latex(self, text: str) -> str: ...

    async def suggest_tags(self, statement: str) -> list[str]: ...
