"""Print queue page ordering."""

from collections import defaultdict
from functools import cmp_to_key, partial


def _parse(text: str) -> tuple[dict[str, list[str]], list[str]]:
    rules_text, separator, updates_text = text.partition("\n\n")
    if not separator:
        raise ValueError("missing blank line between rules and updates")
    return _build_rule_map(rules_text), updates_text.splitlines()


def _build_rule_map(rules_text: str) -> dict[str, list[str]]:
    """Map each page to the pages that must be printed before it."""
    rules: dict[str, list[str]] = defaultdict(list)
    for rule in rules_text.splitlines():
        before, separator, after = rule.partition("|")
        if not separator:
            raise ValueError(f"malformed rule: {rule!r}")
        rules[after].append(before)
    return dict(rules)


def _is_valid_update(update: str, rules: dict[str, list[str]]) -> bool:
    pages = update.split(",")
    for index, page in enumerate(pages):
        rest = pages[index:]
        if any(required in rest for required in rules.get(page, ())):
            return False
    return True


def _middle_number(update: str) -> int:
    numbers = [int(page) for page in update.split(",")]
    return numbers[(len(numbers) - 1) // 2]


def _page_order(rules: dict[str, list[str]], a: str, b: str) -> int:
    """Place a after b when b must be printed before a."""
    predecessors = rules.get(a, ())
    if b in predecessors:
        return 1
    return -1


def _reorder(update: str, rules: dict[str, list[str]]) -> str:
    key = cmp_to_key(partial(_page_order, rules))
    return ",".join(sorted(update.split(","), key=key))


def part_one(text: str) -> int:
    """Sum the middle pages of the updates already in the right order."""
    rules, updates = _parse(text)
    return sum(_middle_number(update) for update in updates if _is_valid_update(update, rules))


def part_two(text: str) -> int:
    """Sum the middle pages of the wrongly ordered updates after reordering them."""
    rules, updates = _parse(text)
    return sum(
        _middle_number(_reorder(update, rules))
        for update in updates
        if not _is_valid_update(update, rules)
    )