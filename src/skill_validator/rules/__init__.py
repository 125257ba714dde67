"""回應規則引擎。

以 Skill 為單位管理有序的回應規則表，依使用者請求選出固定回應。
"""

from skill_validator.rules.base import (
    ResponseRule,
    RuleMatch,
    RuleTable,
    contains_all,
    contains_any,
    match_rules,
)
from skill_validator.rules.registry import GENERIC_RESPONSE, RuleRegistry
from skill_validator.rules.setup import create_default_registry

__all__ = [
    'GENERIC_RESPONSE',
    'ResponseRule',
    'RuleMatch',
    'RuleRegistry',
    'RuleTable',
    'contains_all',
    'contains_any',
    'create_default_registry',
    'match_rules',
]
