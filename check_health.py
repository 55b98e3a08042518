#!/usr/bin/env python3
"""
Print stored sessions and the backend database health report.

Usage:
    python check_health.py              # Sessions + database health
    python check_health.py --sessions   # Stored sessions only
    python check_health.py --logout partner   # Clear one domain's session
"""

import asyncio
import sys
from pathlib import Path

# Add project to path
sys.path.insert(0, str(Path(__file__).parent))

from app.container import Container
from launchpad_client import AuthDomain
from launchpad_client.health import format_bytes, get_dead_tuple_status, get_health_status
from settings.logging import setup_logging

logger = setup_logging(level="INFO", to_file=True)

STATUS_ICON = {"healthy": "✅", "warning": "⚠️ ", "critical": "❌"}


def print_sessions(c: Container):
    print("\n" + "=" * 60)
    print("STORED SESSIONS")
    print("=" * 60)
    for store in (c.admin_store, c.manager_store, c.portal_store, c.partner_store):
        session = store.get()
        who = (session.user.email or session.user.id) if session else "-"
        print(f"  {store.domain:<20} {who}")
    print("=" * 60 + "\n")


async def print_health(c: Container) -> bool:
    if not c.admin.is_authenticated:
        print("\n⚠️  No admin session stored. Log in first.\n")
        return False

    db = await c.health_queries.database()
    tables = await c.health_queries.tables()
    indexes = await c.health_queries.indexes()
    if db.is_error:
        logger.error("Health check failed: {}", db.error)
        return False

    status = get_health_status(db.data["cache_hit_ratio"])
    print("\n" + "=" * 60)
    print("DATABASE HEALTH")
    print("=" * 60)
    print(f"  Size: {db.data['db_size_mb']:,} MB")
    print(f"  Cache hit ratio: {db.data['cache_hit_ratio']}% {STATUS_ICON[status]}")
    print(f"  Connections: {db.data['active_connections']}/{db.data['total_connections']}")

    for table in tables.data or []:
        dead = get_dead_tuple_status(table["dead_ratio"])
        print(f"  {table['table_name']:<32} {format_bytes(table['table_size_bytes']):>10} dead {table['dead_ratio']}% {STATUS_ICON[dead]}")

    unused = [i for i in indexes.data or [] if i["is_unused"]]
    if unused:
        print(f"\n  Unused indexes ({len(unused)}):")
        for index in unused:
            print(f"    {index['index_name']} on {index['table_name']} ({format_bytes(index['index_size_bytes'])})")
    print("=" * 60 + "\n")
    return status != "critical"


async def main():
    args = sys.argv[1:]

    async with Container() as c:
        if "--logout" in args:
            domain = AuthDomain(args[args.index("--logout") + 1])
            context = {
                AuthDomain.ADMIN: c.admin,
                AuthDomain.INFLUENCER_MANAGER: c.manager,
                AuthDomain.INFLUENCER_PORTAL: c.portal,
                AuthDomain.PARTNER: c.partner,
            }[domain]
            context.logout()
            return

        print_sessions(c)
        if "--sessions" in args:
            return

        if not await print_health(c):
            sys.exit(1)


if __name__ == "__main__":
    asyncio.run(main())
