from sqlalchemy.orm import Session

from db.crud.categories import count_categories, get_categories
from db.crud.tags import count_tags
from db.crud.tutorials import (
    count_tutorials,
    get_all_tutorials,
    get_popular_tutorials,
    get_recent_tutorials,
    total_views,
)


def get_home(db: Session) -> dict:
    return {
        "featured": get_popular_tutorials(db, 3),
        "recent": get_recent_tutorials(db, 6),
        "categories": get_categories(db, limit=8),
        "stats": {
            "totalProblems": count_tutorials(db, published_only=True),
            "totalCategories": count_categories(db),
            "totalTopics": count_tags(db),
        },
    }


def get_admin_stats(db: Session) -> dict:
    recent, _ = get_all_tutorials(db, page=1, page_size=5)
    return {
        "totalTutorials": count_tutorials(db),
        "publishedTutorials": count_tutorials(db, published_only=True),
        "totalCategories": count_categories(db),
        "totalTags": count_tags(db),
        "totalViews": total_views(db),
        "recent": recent,
    }
