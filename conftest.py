'''KR: 테스트 저장소 픽스처. EN: Pytest repository fixtures.'''

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from core.logging import LOGGER_NAMESPACES
from tests.fixtures.virtual_fs import create_virtual_tree


@pytest.fixture
def sample_repo(tmp_path: Path) -> Path:
    '''샘플 저장소를 구성한다(KR). Provision a small mixed-language repository (EN).'''

    repo = tmp_path / 'project'
    create_virtual_tree(
        repo,
        {
            'README.md': '# Sample\n\nA tiny repository.\n',
            'src/main.go': 'package main\n\n// entry point\nfunc main() {}\n',
            'src/util.py': 'import os  # stdlib\n\n\nprint(os.sep)\n',
            'web/index.html': '<!doctype html>\n<!-- banner -->\n<p>hi</p>\n',
            'web/site.css': 'body {\t\tcolor:  red; }  /* theme */\n',
            'config/settings.json': '{\n  "name": "demo",\n  "debug": true\n}\n',
            'scripts/deploy': '#!/usr/bin/env bash\necho deploy\n',
            'node_modules/big.js': 'module.exports = {};\n',
            'build/out.txt': 'generated\n',
        },
    )
    (repo / 'assets').mkdir()
    (repo / 'assets' / 'data.bin').write_bytes(b'0123456789\x00\x01\x02binary')
    return repo


@pytest.fixture
def reset_logging():
    '''로깅 핸들러 정리(KR). Detach file handlers installed by configure_logging (EN).'''

    yield
    for name in LOGGER_NAMESPACES:
        logger = logging.getLogger(name)
        for handler in list(logger.handlers):
            handler.close()
            logger.removeHandler(handler)
