"""Provider 模組。

提供可供評估框架呼叫的 Provider 實作。
"""

from skill_validator.providers.base import Provider, ProviderResponse, TokenUsage
from skill_validator.providers.skill_validator_provider import PROVIDER_ID, SkillValidatorProvider

__all__ = [
    'PROVIDER_ID',
    'Provider',
    'ProviderResponse',
    'SkillValidatorProvider',
    'TokenUsage',
]
