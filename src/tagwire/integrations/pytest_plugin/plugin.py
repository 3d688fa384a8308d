from __future__ import annotations

import pytest

from tagwire.container import Container


@pytest.fixture()
def tagwire_container() -> Container:
    """Create a per-test container.

    The fixture is function-scoped, so registrations are isolated between tests
    unless users override fixture scope explicitly. Override the fixture in a
    ``conftest.py`` to pre-register bindings shared by a test module.

    Returns:
        A new ``Container`` instance.

    """
    return Container()
