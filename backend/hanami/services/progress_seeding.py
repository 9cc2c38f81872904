"""Progress Data Seeding: populates the progress-tracking templates a new deployment needs.

Invariants:
    - Steps run in dependency order: abilities, tree, goals, version snapshot, quota levels
    - A step is skipped when its collection already has rows, so re-running is safe
    - Returns {collection: rows inserted}; a failing step raises and stops the run
    - Goals and the version snapshot are keyed on the tree: a tree left without them
      by an interrupted run gets them on the next run
"""

import logging

from hanami.core.domain_types import Collection
from hanami.core.query import Order, eq
from hanami.infrastructure.data_adapter import DataAdapter

logger = logging.getLogger(__name__)

DEFAULT_ABILITIES = [
    {"ability_name": "音準", "ability_description": "辨別與唱出正確音高", "ability_icon": "🎵", "max_level": 5},
    {"ability_name": "節奏感", "ability_description": "跟隨並保持穩定拍子", "ability_icon": "🥁", "max_level": 5},
    {"ability_name": "專注力", "ability_description": "在活動中持續集中注意力", "ability_icon": "👀", "max_level": 5},
    {"ability_name": "小肌肉協調", "ability_description": "手指獨立與協調能力", "ability_icon": "✋", "max_level": 5},
    {"ability_name": "聆聽能力", "ability_description": "理解並回應聲音與指示", "ability_icon": "👂", "max_level": 5},
]

DEFAULT_TREE = {
    "tree_name": "幼兒鋼琴基礎成長樹",
    "tree_description": "鋼琴入門階段的學習目標",
    "tree_icon": "🌳",
    "course_type": "鋼琴",
    "tree_level": 1,
    "is_active": True,
}

DEFAULT_GOALS = [
    {"goal_name": "認識琴鍵", "goal_order": 1, "progress_max": 5},
    {"goal_name": "正確坐姿與手型", "goal_order": 2, "progress_max": 5},
    {"goal_name": "中央C位置", "goal_order": 3, "progress_max": 5},
    {"goal_name": "簡單節奏拍打", "goal_order": 4, "progress_max": 5},
    {"goal_name": "雙手輪流彈奏", "goal_order": 5, "progress_max": 5},
]

DEFAULT_QUOTA_LEVELS = [
    {
        "level_name": "基礎版", "video_limit": 5, "photo_limit": 10,
        "storage_limit_mb": 250, "video_size_limit_mb": 20, "photo_size_limit_mb": 1,
        "description": "適合新學生的基礎方案，提供基本的媒體上傳功能",
    },
    {
        "level_name": "標準版", "video_limit": 20, "photo_limit": 50,
        "storage_limit_mb": 1500, "video_size_limit_mb": 100, "photo_size_limit_mb": 20,
        "description": "適合一般學習需求，提供充足的媒體配額",
    },
    {
        "level_name": "進階版", "video_limit": 50, "photo_limit": 100,
        "storage_limit_mb": 5000, "video_size_limit_mb": 200, "photo_size_limit_mb": 50,
        "description": "適合進階學習需求，提供大量媒體配額",
    },
    {
        "level_name": "專業版", "video_limit": 100, "photo_limit": 200,
        "storage_limit_mb": 10240, "video_size_limit_mb": 500, "photo_size_limit_mb": 100,
        "description": "適合專業學習需求，提供最大媒體配額",
    },
]


async def _seed_if_empty(
    adapter: DataAdapter, collection: Collection, rows: list[dict],
) -> list[dict]:
    if await adapter.count(collection) > 0:
        logger.info(
            f"Skipping {collection.value}: already populated",
            extra={"collection": collection.value},
        )
        return []
    return await adapter.insert(collection, rows)


def _goal_snapshot(goal: dict) -> dict:
    return {
        "id": goal["id"],
        "goal_name": goal["goal_name"],
        "goal_order": goal["goal_order"],
        "progress_max": goal["progress_max"],
    }


async def seed_progress_data(adapter: DataAdapter) -> dict[str, int]:
    """Run every seeding step; returns rows inserted per collection."""
    inserted: dict[str, int] = {}

    abilities = await _seed_if_empty(
        adapter, Collection.DEVELOPMENT_ABILITIES, DEFAULT_ABILITIES,
    )
    inserted[Collection.DEVELOPMENT_ABILITIES.value] = len(abilities)

    existing_tree = await adapter.select_one(
        Collection.GROWTH_TREES, filters=[eq("tree_name", DEFAULT_TREE["tree_name"])],
    )
    trees = [] if existing_tree else await adapter.insert(
        Collection.GROWTH_TREES, DEFAULT_TREE,
    )
    inserted[Collection.GROWTH_TREES.value] = len(trees)

    tree_id = (existing_tree or trees[0])["id"]
    tree_scope = [eq("tree_id", tree_id)]

    goals: list[dict] = []
    if await adapter.count(Collection.GROWTH_GOALS, tree_scope) == 0:
        ability_ids = [a["id"] for a in abilities] or [
            a["id"] for a in await adapter.select(
                Collection.DEVELOPMENT_ABILITIES, columns=["id"], limit=2,
            )
        ]
        goals = await adapter.insert(
            Collection.GROWTH_GOALS,
            [
                {**goal, "tree_id": tree_id, "required_abilities": ability_ids[:2]}
                for goal in DEFAULT_GOALS
            ],
        )

    versions: list[dict] = []
    if await adapter.count(Collection.GROWTH_TREE_VERSIONS, tree_scope) == 0:
        snapshot = goals or await adapter.select(
            Collection.GROWTH_GOALS, filters=tree_scope, order=[Order("goal_order")],
        )
        versions = await adapter.insert(
            Collection.GROWTH_TREE_VERSIONS,
            {
                "tree_id": tree_id,
                "version": "1.0",
                "version_name": "初始版本",
                "goals_snapshot": [_goal_snapshot(g) for g in snapshot],
                "changes_summary": "初始化建立",
            },
        )

    inserted[Collection.GROWTH_GOALS.value] = len(goals)
    inserted[Collection.GROWTH_TREE_VERSIONS.value] = len(versions)

    quota_levels = await _seed_if_empty(
        adapter, Collection.MEDIA_QUOTA_LEVELS,
        [{**level, "is_active": True} for level in DEFAULT_QUOTA_LEVELS],
    )
    inserted[Collection.MEDIA_QUOTA_LEVELS.value] = len(quota_levels)

    logger.info(f"Progress data seeded: {inserted}")
    return inserted


def get_progress_seeder():
    """FastAPI dependency: the seeding procedure run by POST /api/init-progress-data."""
    return seed_progress_data
