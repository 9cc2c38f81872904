"""Growth Tree Version Comparison: goal diff between two versions of a tree.

Invariants:
    - treeId is required (400 without it)
    - One read fetches every version of the tree; the diff itself is pure (core/version_diff.py)
    - Missing versions are 404, never an empty success
"""

from fastapi import APIRouter, Query

from hanami.api.deps import StandardAdapter
from hanami.api.route_handler import enveloped
from hanami.core.domain_types import Collection
from hanami.core.query import desc, eq
from hanami.core.version_diff import compare_goal_snapshots, pick_versions

router = APIRouter(prefix="/api/version-comparison", tags=["growth-trees"])


def _version_summary(version: dict) -> dict:
    return {
        "id": version["id"],
        "version": version["version"],
        "version_name": version.get("version_name"),
        "created_at": version.get("created_at"),
    }


@router.get("")
@enveloped()
async def compare_versions(
    adapter: StandardAdapter,
    tree_id: str = Query(..., alias="treeId", min_length=1),
    from_version: str | None = Query(None, alias="fromVersion"),
    to_version: str | None = Query(None, alias="toVersion"),
):
    versions = await adapter.select(
        Collection.GROWTH_TREE_VERSIONS,
        filters=[eq("tree_id", tree_id)],
        order=[desc("created_at")],
    )
    base, target = pick_versions(versions, tree_id, from_version, to_version)
    return {
        "tree_id": tree_id,
        "from_version": _version_summary(base),
        "to_version": _version_summary(target),
        **compare_goal_snapshots(base["goals_snapshot"], target["goals_snapshot"]),
    }
