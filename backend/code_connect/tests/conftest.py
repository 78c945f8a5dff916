import os

# Tests never shell out to Prettier unless they ask for it explicitly
os.environ.setdefault("FORMATTER", "none")
os.environ.setdefault("LOG_LEVEL", "DEBUG")

import pytest

from code_connect.models.schemas import Component


@pytest.fixture
def make_component():
    def _make(properties=None, normalized_name="Button"):
        return Component.model_validate(
            {
                "normalizedName": normalized_name,
                "figmaNodeUrl": "https://www.figma.com/design/abc123/Kit?node-id=1-2",
                "componentPropertyDefinitions": properties or {},
            }
        )

    return _make
