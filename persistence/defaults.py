from __future__ import annotations

import copy
from typing import Any

POSTS = "posts"
ORDERS = "orders"
SITE_SETTINGS = "settings"

DOCUMENT_NAMES = (POSTS, ORDERS, SITE_SETTINGS)

# Returned by the settings store when no settings document is persisted.
MINIMAL_SITE_SETTINGS: dict[str, str] = {
    "siteName": "DVX Studio",
    "siteDescription": "Креативные решения для ваших проектов",
}

_SEED_POSTS: list[dict[str, Any]] = [
    {
        "id": 1,
        "title": "Дизайн Discord сервера",
        "description": "Полный редизайн с кастомными эмодзи",
        "category": "design",
        "type": "image",
        "date": "2025-01-20",
        "content": "",
    },
    {
        "id": 2,
        "title": "Windows Optimizer",
        "description": "Программа для оптимизации Windows 10/11",
        "category": "windows",
        "type": "software",
        "price": 0,
        "date": "2025-01-15",
    },
    {
        "id": 3,
        "title": "Juniper Setup Guide",
        "description": "Как настроить Juniper Bot за 5 минут",
        "category": "juniper",
        "type": "video",
        "content": "https://www.youtube.com/embed/dQw4w9WgXcQ",
        "date": "2025-01-10",
    },
]


def default_documents() -> dict[str, Any]:
    """
    Build the documents written on first start, keyed by document name:

      posts    -> { "posts": [3 seed posts] }
      orders   -> { "orders": [] }
      settings -> full site settings (name, description, external links)

    Returns fresh copies on every call.
    """
    return {
        POSTS: {POSTS: copy.deepcopy(_SEED_POSTS)},
        ORDERS: {ORDERS: []},
        SITE_SETTINGS: {
            **MINIMAL_SITE_SETTINGS,
            "discordLink": "https://discord.gg/example",
            "youtubeLink": "https://youtube.com/@zoliryzik",
        },
    }
