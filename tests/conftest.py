"""全域測試設定。"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest
from dotenv import load_dotenv

from skill_validator.config import ValidatorConfig
from skill_validator.providers import SkillValidatorProvider

# 載入 .env，確保測試時也能讀取 SKILL_VALIDATOR_ROOT 等環境變數
load_dotenv()

TDD_SKILL_CONTENT = """\
---
name: test-driven-development
description: Use when implementing any feature or bugfix, before writing implementation code
---

# Test-Driven Development

Write the test first. Watch it fail. Write minimal code to pass. Refactor.
Start every task with a test list of the scenarios you need to cover.
"""

JIRA_SKILL_CONTENT = """\
---
name: jira-cli
description: Interact with Jira from the command line using jira-cli
---

# Jira CLI

Always pass --plain when listing issues and --no-input when creating them.
Use --template for descriptions that contain bullets or special characters.
"""

GENERIC_SKILL_CONTENT = """\
# Release Notes

Summarize merged pull requests by category, link each entry to its pull request,
and keep the tone neutral and factual.
"""


@pytest.fixture
def skills_root(tmp_path: Path) -> Path:
    """建立含多個 Skill 文件的工作根目錄。"""
    documents = {
        'test-driven-development': TDD_SKILL_CONTENT,
        'jira-cli': JIRA_SKILL_CONTENT,
        'release-notes': GENERIC_SKILL_CONTENT,
        'stub': '# Stub\n\nTODO\n',
        'empty': '',
    }
    for name, content in documents.items():
        skill_dir = tmp_path / 'skills' / name
        skill_dir.mkdir(parents=True)
        (skill_dir / 'SKILL.md').write_text(content, encoding='utf-8')
    return tmp_path


@pytest.fixture
def provider(skills_root: Path) -> SkillValidatorProvider:
    """以測試工作根目錄建立的 Provider。"""
    return SkillValidatorProvider(config=ValidatorConfig(working_root=skills_root))


@pytest.fixture
def make_prompt() -> Callable[..., str]:
    """依評估框架的格式組出 prompt。"""

    def _make_prompt(skill: str, request: str | None = None) -> str:
        lines = [
            'You have access to the following skill. Read it before answering.',
            f'Skill file: file://skills/{skill}/SKILL.md',
        ]
        if request is not None:
            lines.append(f'User request: {request}')
        return '\n\n'.join(lines)

    return _make_prompt
