"""內建 Skill 規則表。

每個規則表的回應內容需與評估設定中的斷言關鍵字一致，修改前請一併確認評估設定。
"""

from __future__ import annotations

from skill_validator.rules.base import ResponseRule, RuleTable, contains_all, contains_any

# =============================================================================
# test-driven-development
# =============================================================================

TDD_IMPLEMENTATION_RESPONSE = """\
Following TDD principles:

1. First, write a test list of scenarios to cover
2. RED: Write a failing test for the factorial function
3. GREEN: Implement the minimum code to make the test pass
4. REFACTOR: Clean up the code while keeping tests green

The Red-Green-Refactor cycle ensures we have tests before implementation."""

TDD_BUG_FIX_RESPONSE = """\
For bug fixes using TDD:

1. Create a test list including the bug scenario
2. Write a failing test that reproduces the bug (empty password case)
3. Verify it fails for the right reason (RED)
4. Fix the bug with minimal code changes (GREEN)
5. Refactor if needed
6. Run the full test suite to prevent regressions"""

TDD_LEGACY_RESPONSE = """\
When working with legacy code:

1. Start with characterization tests to document current behavior
2. Use the Strangler Fig pattern to grow tested code around legacy code
3. Test what you change - don't try to test everything at once
4. Extract new logic into testable units"""

TDD_SKIP_RESPONSE = """\
I don't recommend skipping tests even for simple code. Here's why:

1. Tests act as precise specifications
2. They prevent future regressions
3. TDD helps with design and reduces hallucination
4. The test list guides implementation"""

TDD_DEFAULT_RESPONSE = (
    'Following TDD workflow: Create test list, write one failing test (RED), '
    'make it pass (GREEN), then refactor. Always write tests first.'
)

TDD_TABLE = RuleTable(
    skill_name='test-driven-development',
    default=TDD_DEFAULT_RESPONSE,
    rules=(
        ResponseRule('implementation', contains_any('implement', 'function'), TDD_IMPLEMENTATION_RESPONSE),
        ResponseRule('bug-fix', contains_any('bug', 'fix'), TDD_BUG_FIX_RESPONSE),
        ResponseRule('legacy', contains_any('legacy'), TDD_LEGACY_RESPONSE),
        ResponseRule('skip', contains_any('skip'), TDD_SKIP_RESPONSE),
    ),
)

# =============================================================================
# jira-cli
# =============================================================================

JIRA_JQL_RESPONSE = """\
For complex queries, use JQL:

```bash
jira issue list -q "assignee = currentUser() AND priority in (High, Highest) AND updated >= -7d" --plain
```

Always use --plain for parseable output."""

JIRA_LIST_RESPONSE = """\
To list issues, always use the --plain flag:

```bash
jira issue list -p PROJECT --plain
```

This provides parseable output suitable for scripting."""

JIRA_TEMPLATE_RESPONSE = """\
For complex descriptions with bullets and special characters, use a template file:

1. Research recent issues first to match team style
2. Create a template file: /tmp/issue-template.md
3. Use --template flag:

```bash
jira issue create -p PROJECT -t Story -s "Summary" --template /tmp/issue-template.md --no-input
```

Always use --no-input to avoid interactive prompts."""

JIRA_SPIKE_RESPONSE = """\
Before creating a Spike, research the team's style:

```bash
jira issue list -p PROJECT -t "Spike" --created month --plain
jira issue view KEY --plain
```

Then create using --template and --no-input flags."""

JIRA_CREATE_RESPONSE = """\
Use --no-input to avoid interactive prompts:

```bash
jira issue create -p PROJECT -t Task -s "Summary" -b "Description" --no-input
```"""

JIRA_DEFAULT_RESPONSE = 'Remember: Always use --plain for listing and --no-input for creation.'

JIRA_CLI_TABLE = RuleTable(
    skill_name='jira-cli',
    default=JIRA_DEFAULT_RESPONSE,
    rules=(
        ResponseRule(
            'list',
            contains_any('list', 'show', 'find'),
            JIRA_LIST_RESPONSE,
            sub_rules=(
                ResponseRule('jql', contains_all('priority', 'updated'), JIRA_JQL_RESPONSE),
            ),
        ),
        ResponseRule(
            'create',
            contains_any('create'),
            JIRA_CREATE_RESPONSE,
            sub_rules=(
                ResponseRule('template', contains_any('story', 'criteria', 'bullet'), JIRA_TEMPLATE_RESPONSE),
                # "Spike" 為 Jira 的 issue type 名稱，需大寫
                ResponseRule('spike', contains_any('Spike'), JIRA_SPIKE_RESPONSE),
            ),
        ),
    ),
)

BUILTIN_TABLES: tuple[RuleTable, ...] = (TDD_TABLE, JIRA_CLI_TABLE)
