import pytest

from selkit import DuplicateSingletonError, OutOfOrderError, combine, element, id
from selkit.cli import main

NESTED = 'div#main.container.draggable + table#data ~ tr:nth-of-type(even)   td:nth-of-type(even)'


def test_nested_combine(nested_selector):
    assert nested_selector.stringify() == NESTED


def test_nested_combine_rejects_further_singletons(nested_selector):
    with pytest.raises(DuplicateSingletonError):
        nested_selector.element('span')
    with pytest.raises(DuplicateSingletonError):
        nested_selector.id('other')


def test_nested_combine_accepts_trailing_pseudo_element(nested_selector):
    assert nested_selector.pseudo_element('after').stringify() == NESTED + '::after'


def test_common_selectors():
    assert element('li').pseudo_class('nth-child(2n+1)').stringify() == 'li:nth-child(2n+1)'
    assert element('p').pseudo_element('first-line').stringify() == 'p::first-line'
    assert (
        combine(element('ul').class_('nav'), '>', element('li').attr('aria-current="page"')).stringify()
        == 'ul.nav > li[aria-current="page"]'
    )
    assert id('root').pseudo_class('not(.hidden)').stringify() == '#root:not(.hidden)'


def test_invalid_chains():
    with pytest.raises(OutOfOrderError):
        element('a').pseudo_element('before').pseudo_class('hover')
    with pytest.raises(DuplicateSingletonError):
        element('a').pseudo_element('before').pseudo_element('after')


def test_cli_matches_api(mocker, monkeypatch, console, console_buffer):
    for name in ('SELKIT_LOG_LEVEL', 'SELKIT_LOG_TO_FILE', 'LOGFIRE_TOKEN'):
        monkeypatch.delenv(name, raising=False)
    mocker.patch('selkit.config.load_dotenv')

    tokens = [
        'element=div',
        'id=main',
        'class=container',
        'class=draggable',
        '+',
        'element=table',
        'id=data',
        '~',
        'element=tr',
        'pseudoClass=nth-of-type(even)',
        ' ',
        'element=td',
        'pseudoClass=nth-of-type(even)',
    ]

    assert main(tokens, console=console) == 0
    assert console_buffer.getvalue().rstrip('\n') == NESTED


def test_cli_writes_log_file(mocker, monkeypatch, project_root, console):
    import logging

    monkeypatch.setenv('SELKIT_LOG_TO_FILE', 'true')
    monkeypatch.setenv('SELKIT_LOG_LEVEL', 'DEBUG')
    monkeypatch.delenv('LOGFIRE_TOKEN', raising=False)
    mocker.patch('selkit.config.load_dotenv')

    root_logger = logging.getLogger()
    before = list(root_logger.handlers)
    level = root_logger.level
    try:
        assert main(['element=div', 'element=span'], console=console) == 1
    finally:
        for handler in list(root_logger.handlers):
            if handler not in before:
                handler.close()
                root_logger.removeHandler(handler)
        root_logger.setLevel(level)

    logs = list((project_root / '.selkit' / 'logs').glob('run_*.log'))
    assert len(logs) == 1
    assert 'Rejected duplicate element' in logs[0].read_text()
