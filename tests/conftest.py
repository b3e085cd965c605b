import io

import pytest
from rich.console import Console

from selkit import SelectorBuilder, combine, element
from selkit.cli import THEME


@pytest.fixture
def seed():
    return SelectorBuilder()


@pytest.fixture
def sibling_selector():
    return combine(element('div').id('main'), '+', element('table').id('data'))


@pytest.fixture
def nested_selector():
    return combine(
        element('div').id('main').class_('container').class_('draggable'),
        '+',
        combine(
            element('table').id('data'),
            '~',
            combine(
                element('tr').pseudo_class('nth-of-type(even)'),
                ' ',
                element('td').pseudo_class('nth-of-type(even)'),
            ),
        ),
    )


@pytest.fixture
def console_buffer():
    return io.StringIO()


@pytest.fixture
def console(console_buffer):
    return Console(file=console_buffer, width=200, color_system=None, theme=THEME)


@pytest.fixture
def project_root(tmp_path, mocker):
    root = tmp_path / 'project'
    root.mkdir()
    (root / 'pyproject.toml').touch()
    mocker.patch('selkit.utils.files.get_project_root', return_value=root)
    return root


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line('markers', 'integration: marks tests as integration tests')
    config.addinivalue_line('markers', 'unit: marks tests as unit tests')


def pytest_collection_modifyitems(config, items):
    """Apply directory-based marks to collected test items."""
    for item in items:
        file_path = str(item.path)

        if '/tests/integration/' in file_path:
            item.add_marker(pytest.mark.integration)
        elif '/tests/unit/' in file_path:
            item.add_marker(pytest.mark.unit)
