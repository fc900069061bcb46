"""Generic validators that ship with the viewer."""

from __future__ import annotations

from typing import List

from .base import EditorSnapshot, Validator, Verdict


def _normalize(code: str) -> str:
    return " ".join(code.split())


class NonEmptyCodeValidator(Validator):
    name = "NonEmptyCode"
    description = "Passes once the editor holds any non-whitespace code."

    def evaluate(self, state: EditorSnapshot) -> Verdict:
        return Verdict.PASSED if state.text.strip() else Verdict.FAILED


class SolutionMatchValidator(Validator):
    name = "SolutionMatch"
    description = "Passes when the code equals the lesson solution, ignoring whitespace layout."

    def evaluate(self, state: EditorSnapshot) -> Verdict:
        if not self.view.solution_code.strip():
            return Verdict.PENDING
        if _normalize(state.text) == _normalize(self.view.solution_code):
            return Verdict.PASSED
        return Verdict.FAILED


class RequiredTokensValidator(Validator):
    """Checks that every token listed in ``ce_settings['required_tokens']`` appears in the code."""

    name = "RequiredTokens"
    description = "Passes when every token in ce_settings.required_tokens occurs in the code."

    @property
    def required_tokens(self) -> List[str]:
        tokens = self.view.ce_settings.get("required_tokens") or []
        if isinstance(tokens, str):
            tokens = [tokens]
        return [str(token) for token in tokens if str(token)]

    def missing_tokens(self, state: EditorSnapshot) -> List[str]:
        return [token for token in self.required_tokens if token not in state.text]

    def evaluate(self, state: EditorSnapshot) -> Verdict:
        if not self.required_tokens:
            return Verdict.PENDING
        return Verdict.FAILED if self.missing_tokens(state) else Verdict.PASSED


__all__ = ["NonEmptyCodeValidator", "RequiredTokensValidator", "SolutionMatchValidator"]
