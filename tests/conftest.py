import pytest
import sys
from itertools import count
from pathlib import Path

# Add src to sys.path so we can import layout_toolkit
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())


# Common test fixtures
@pytest.fixture
def root_id_factory():
    """Deterministic synthetic root ids: root-1, root-2, ..."""
    counter = count(1)
    return lambda: f"root-{next(counter)}"


@pytest.fixture
def simple_group_layout() -> list[dict]:
    """One group holding one input."""
    return [
        {"id": "c1", "type": "Group", "children": ["c2"]},
        {"id": "c2", "type": "Input"},
    ]


@pytest.fixture
def form_layout() -> list[dict]:
    """Header, a repeating group with a nested group, and a trailing button."""
    return [
        {"id": "header", "type": "Header", "size": "L", "textResourceBindings": {"title": "form.title"}},
        {
            "id": "people",
            "type": "Group",
            "children": ["name", "address-group"],
            "maxCount": 5,
            "dataModelBindings": {"group": "Person"},
        },
        {"id": "name", "type": "Input", "dataModelBindings": {"simpleBinding": "Person.Name"}, "required": True},
        {"id": "address-group", "type": "Group", "children": ["street", "zip"], "maxCount": 0},
        {"id": "street", "type": "Input", "dataModelBindings": {"simpleBinding": "Person.Street"}},
        {"id": "zip", "type": "Input", "dataModelBindings": {"simpleBinding": "Person.Zip"}},
        {"id": "submit", "type": "Button", "textResourceBindings": {"title": "submit"}},
    ]


@pytest.fixture
def multi_page_layout() -> list[dict]:
    """A multiPage group whose children carry page prefixes."""
    return [
        {"id": "pages", "type": "Group", "children": ["0:first", "1:second"], "edit": {"multiPage": True}},
        {"id": "first", "type": "Input"},
        {"id": "second", "type": "TextArea"},
    ]
