from overlaykit.dom import DomDriver, DomElement, class_tokens, has_class

from fakes import FakeDriver, FakeElement


def test_class_tokens_deduplicates_and_trims() -> None:
    assert class_tokens("MuiPopover-root  MuiModal-root MuiPopover-root") == ["MuiPopover-root", "MuiModal-root"]
    assert class_tokens([" a ", "b", "", "a"]) == ["a", "b"]


def test_class_tokens_treats_missing_or_malformed_values_as_empty() -> None:
    assert class_tokens(None) == []
    assert class_tokens("") == []
    assert class_tokens("   ") == []
    assert class_tokens(42) == []


def test_has_class_requires_full_token() -> None:
    element = FakeElement("attr-1 attr-2 attr-3")
    assert has_class(element, "attr-1")
    assert not has_class(element, "attr")
    assert not has_class(element, "ATTR-1")
    assert not has_class(FakeElement(None), "attr-1")


def test_fakes_satisfy_dom_protocols() -> None:
    assert isinstance(FakeElement("x"), DomElement)
    assert isinstance(FakeDriver(), DomDriver)
