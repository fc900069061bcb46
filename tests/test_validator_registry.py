import pytest

from codium.validators.base import EditorSnapshot, Validator, Verdict
from codium.validators.builtin import (
    NonEmptyCodeValidator,
    RequiredTokensValidator,
    SolutionMatchValidator,
)
from codium.validators.defaults import build_default_registry
from codium.validators.registry import (
    ResolvedValidator,
    UnresolvedValidator,
    ValidatorBinding,
    ValidatorRegistry,
)
from tests.mocks.collaborators import AlwaysPass, make_view


def test_default_registry_describes_builtin_validators() -> None:
    registry = build_default_registry()
    description = registry.describe()
    assert set(description) == {"NonEmptyCode", "SolutionMatch", "RequiredTokens"}
    assert "whitespace" in description["SolutionMatch"]


def test_extra_validators_are_registered() -> None:
    registry = build_default_registry(extra=[AlwaysPass])
    assert "AlwaysPass" in registry
    assert len(registry) == 4


def test_resolve_known_name() -> None:
    registry = build_default_registry()
    resolution = registry.resolve("  SolutionMatch ")
    assert isinstance(resolution, ResolvedValidator)
    assert resolution.name == "SolutionMatch"


@pytest.mark.parametrize("name", ["Unknown", "", None, "solutionmatch"])
def test_resolve_unknown_name(name) -> None:
    resolution = build_default_registry().resolve(name)
    assert isinstance(resolution, UnresolvedValidator)


def test_build_returns_fresh_instance_scoped_to_view() -> None:
    registry = build_default_registry()
    view = make_view()
    first = registry.build("NonEmptyCode", view)
    second = registry.build("NonEmptyCode", view)
    assert isinstance(first, NonEmptyCodeValidator)
    assert first is not second
    assert first.view is view


def test_build_unknown_raises_key_error() -> None:
    with pytest.raises(KeyError):
        build_default_registry().build("Missing", make_view())


def test_duplicate_registration_is_rejected() -> None:
    registry = ValidatorRegistry()
    registry.register_class(AlwaysPass)
    with pytest.raises(ValueError):
        registry.register(ValidatorBinding(name="AlwaysPass", factory=AlwaysPass))


def test_register_class_requires_validator_capability() -> None:
    with pytest.raises(TypeError):
        ValidatorRegistry().register_class(dict)


def test_factory_must_return_validator() -> None:
    registry = ValidatorRegistry()
    registry.register(ValidatorBinding(name="Bogus", factory=lambda view: object()))
    with pytest.raises(TypeError):
        registry.build("Bogus", make_view())


def test_register_class_accepts_name_override() -> None:
    registry = ValidatorRegistry()
    registry.register_class(AlwaysPass, name="lesson_3.Check")
    assert registry.names() == ["lesson_3.Check"]


def test_release_is_idempotent() -> None:
    validator = AlwaysPass(make_view())
    validator.release()
    validator.release()
    assert validator.released


def test_validator_is_abstract() -> None:
    with pytest.raises(TypeError):
        Validator(make_view())


def test_non_empty_code_validator() -> None:
    validator = NonEmptyCodeValidator(make_view())
    assert validator.evaluate(EditorSnapshot(text="  \n")) is Verdict.FAILED
    assert validator.evaluate(EditorSnapshot(text="x")) is Verdict.PASSED


def test_solution_match_ignores_whitespace_layout() -> None:
    validator = SolutionMatchValidator(make_view(solution_code="x = 3\nprint(x)"))
    assert validator.evaluate(EditorSnapshot(text="x  =  3   print(x)\n")) is Verdict.PASSED
    assert validator.evaluate(EditorSnapshot(text="x = 4\nprint(x)")) is Verdict.FAILED


def test_solution_match_without_solution_is_pending() -> None:
    validator = SolutionMatchValidator(make_view(solution_code=""))
    assert validator.evaluate(EditorSnapshot(text="anything")) is Verdict.PENDING


def test_required_tokens_validator() -> None:
    view = make_view(ce_settings={"required_tokens": ["x = 3", "print(x)"]})
    validator = RequiredTokensValidator(view)
    assert validator.missing_tokens(EditorSnapshot(text="x = 3")) == ["print(x)"]
    assert validator.evaluate(EditorSnapshot(text="x = 3")) is Verdict.FAILED
    assert validator.evaluate(EditorSnapshot(text="x = 3\nprint(x)")) is Verdict.PASSED


def test_required_tokens_without_tokens_is_pending() -> None:
    validator = RequiredTokensValidator(make_view(ce_settings={}))
    assert validator.evaluate(EditorSnapshot(text="x")) is Verdict.PENDING
