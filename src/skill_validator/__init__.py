"""Skill Validator - 離線驗證 Skill 文件載入的評估用 Provider。"""

__version__ = '0.1.0'

from skill_validator.config import ValidatorConfig
from skill_validator.providers import ProviderResponse, SkillValidatorProvider, TokenUsage
from skill_validator.rules import RuleRegistry, RuleTable, create_default_registry

__all__ = [
    'ProviderResponse',
    'RuleRegistry',
    'RuleTable',
    'SkillValidatorProvider',
    'TokenUsage',
    'ValidatorConfig',
    'create_default_registry',
]
