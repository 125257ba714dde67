"""回應規則基礎定義。

一條規則由「請求條件」與「固定回應」組成；規則可再帶一組子規則，
條件成立後才進入子規則判斷，子規則皆不符合時使用該規則自身的回應。
所有比對皆為區分大小寫的子字串比對。
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field

Predicate = Callable[[str], bool]


def contains_any(*terms: str) -> Predicate:
    """請求包含任一關鍵字即成立。"""

    def predicate(request: str) -> bool:
        return any(term in request for term in terms)

    return predicate


def contains_all(*terms: str) -> Predicate:
    """請求包含所有關鍵字才成立。"""

    def predicate(request: str) -> bool:
        return all(term in request for term in terms)

    return predicate


@dataclass(frozen=True)
class RuleMatch:
    """規則比對結果。

    Attributes:
        rule_path: 命中的規則名稱路徑（巢狀規則依序列出）
        response: 對應的固定回應
    """

    rule_path: tuple[str, ...]
    response: str

    @property
    def rule_name(self) -> str:
        """以 "/" 串接的規則路徑。"""
        return '/'.join(self.rule_path)


@dataclass(frozen=True)
class ResponseRule:
    """回應規則。

    Attributes:
        name: 規則名稱（用於日誌與測試）
        predicate: 請求條件
        response: 固定回應；有子規則時作為子規則皆不符合時的回應
        sub_rules: 子規則（依序比對，第一個符合者勝出）
    """

    name: str
    predicate: Predicate
    response: str
    sub_rules: tuple[ResponseRule, ...] = ()

    def resolve(self, request: str) -> RuleMatch:
        """在條件已成立的前提下，決定最終回應。"""
        sub_match = match_rules(self.sub_rules, request)
        if sub_match is not None:
            return RuleMatch((self.name, *sub_match.rule_path), sub_match.response)
        return RuleMatch((self.name,), self.response)


def match_rules(rules: tuple[ResponseRule, ...], request: str) -> RuleMatch | None:
    """由上而下比對規則，回傳第一個符合者的結果。

    Args:
        rules: 依優先順序排列的規則
        request: 使用者請求

    Returns:
        比對結果，全部不符合時回傳 None
    """
    for rule in rules:
        if rule.predicate(request):
            return rule.resolve(request)
    return None


@dataclass(frozen=True)
class RuleTable:
    """單一 Skill 的規則表。

    Attributes:
        skill_name: Skill 識別名稱（文件所在目錄名）
        default: 所有規則皆不符合時的預設回應
        rules: 依優先順序排列的規則
    """

    skill_name: str
    default: str
    rules: tuple[ResponseRule, ...] = field(default_factory=tuple)

    def select(self, request: str) -> RuleMatch:
        """選出回應，保證一定有結果。"""
        match = match_rules(self.rules, request)
        if match is None:
            return RuleMatch(('default',), self.default)
        return match
