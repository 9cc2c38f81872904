"""Growth Tree Version Diff: pure comparison of two goal snapshots.

Invariants:
    - Goals are matched by id, falling back to goal_name when a snapshot entry has no id
    - Every goal of either snapshot lands in exactly one of added/removed/modified/unchanged
    - Output order follows goal_order, then name (stable for identical input)
    - No IO; callers fetch the versions
"""

from hanami.core.errors import ResourceNotFoundError

# Fields that carry no meaning for a goal's content.
_IGNORED_FIELDS = frozenset({"created_at", "updated_at"})


def _goal_key(goal: dict) -> str:
    return str(goal.get("id") or goal.get("goal_name") or "")


def _sort_key(goal: dict):
    return (goal.get("goal_order") or 0, str(goal.get("goal_name") or ""))


def _changed_fields(before: dict, after: dict) -> list[str]:
    keys = (set(before) | set(after)) - _IGNORED_FIELDS
    return sorted(k for k in keys if before.get(k) != after.get(k))


def compare_goal_snapshots(before: list[dict], after: list[dict]) -> dict:
    """Diff two goal lists into added, removed, modified and unchanged goals."""
    old = {_goal_key(g): g for g in before or []}
    new = {_goal_key(g): g for g in after or []}

    added = sorted((g for k, g in new.items() if k not in old), key=_sort_key)
    removed = sorted((g for k, g in old.items() if k not in new), key=_sort_key)
    modified = []
    unchanged = []
    for key in sorted(old.keys() & new.keys(), key=lambda k: _sort_key(new[k])):
        fields = _changed_fields(old[key], new[key])
        if fields:
            modified.append({
                "goal_id": key,
                "goal_name": new[key].get("goal_name"),
                "changed_fields": fields,
                "before": {f: old[key].get(f) for f in fields},
                "after": {f: new[key].get(f) for f in fields},
            })
        else:
            unchanged.append(new[key])

    return {
        "added_goals": added,
        "removed_goals": removed,
        "modified_goals": modified,
        "unchanged_goals": unchanged,
        "summary": {
            "added": len(added),
            "removed": len(removed),
            "modified": len(modified),
            "unchanged": len(unchanged),
        },
    }


def pick_versions(
    versions: list[dict],
    tree_id: str,
    from_version: str | None = None,
    to_version: str | None = None,
) -> tuple[dict, dict]:
    """Choose the (from, to) pair; versions must be ordered newest first.

    Defaults: to = newest, from = the version right before `to`.
    """
    by_label = {str(v.get("version")): v for v in versions}

    if to_version is not None:
        target = by_label.get(to_version)
        if target is None:
            raise ResourceNotFoundError("版本", f"{tree_id}@{to_version}", "找不到指定版本")
    elif versions:
        target = versions[0]
    else:
        raise ResourceNotFoundError("成長樹版本", tree_id, "此成長樹沒有版本記錄")

    if from_version is not None:
        base = by_label.get(from_version)
        if base is None:
            raise ResourceNotFoundError("版本", f"{tree_id}@{from_version}", "找不到指定版本")
    else:
        older = versions[versions.index(target) + 1:]
        if not older:
            raise ResourceNotFoundError("成長樹版本", tree_id, "至少需要兩個版本才能比較")
        base = older[0]

    return base, target
