"""Day 5: ordering safety manual updates by page rules."""

from __future__ import annotations

from aoc24.runner import solution_main

DAY = 5

Rule = tuple[int, int]


def _parse(text: str) -> tuple[list[Rule], list[list[int]]]:
    if "\n\n" not in text:
        raise ValueError("expected rules and updates separated by a blank line")
    first, second = text.split("\n\n", 1)
    rules = []
    for line in first.splitlines():
        before, sep, after = line.partition("|")
        if not sep:
            raise ValueError(f"malformed rule: {line!r}")
        rules.append((int(before), int(after)))
    updates = [[int(page) for page in line.split(",")] for line in second.splitlines()]
    return rules, updates


def _is_ordered(pages: list[int], rules: list[Rule]) -> bool:
    for before, after in rules:
        if before in pages and after in pages and pages.index(before) > pages.index(after):
            return False
    return True


def _reorder(pages: list[int], rules: list[Rule]) -> list[int]:
    to_order = set(pages)
    ordered: list[int] = []
    while to_order:
        candidate = next(
            (
                page
                for page in sorted(to_order)
                if not any(after == page and before in to_order for before, after in rules)
            ),
            None,
        )
        if candidate is None:
            raise ValueError(f"rules form a cycle among pages {sorted(to_order)}")
        ordered.append(candidate)
        to_order.remove(candidate)
    return ordered


def part_one(text: str) -> int:
    rules, updates = _parse(text)
    return sum(pages[len(pages) // 2] for pages in updates if _is_ordered(pages, rules))


def part_two(text: str) -> int:
    rules, updates = _parse(text)
    total = 0
    for pages in updates:
        if _is_ordered(pages, rules):
            continue
        ordered = _reorder(pages, rules)
        total += ordered[len(ordered) // 2]
    return total


def main(argv: list[str] | None = None) -> None:
    solution_main(DAY, {1: part_one, 2: part_two}, argv)