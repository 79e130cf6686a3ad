#!/usr/bin/env python3
"""
Registry state management script:
- show statistics for the registry document
- check the tag count invariant
- back up the document
- grant the default admin role offline (e.g. to recover a lost admin)

This script works on the persisted document directly and never contacts the
ownership ledger.
"""

import argparse
import json
import logging
from pathlib import Path
from typing import Any, Dict, List

from tag_registry.events import EventLog
from tag_registry.models import normalize_account
from tag_registry.roles import RoleAuthority
from tag_registry.storage import RegistryStore

# Set up logging
logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')
logger = logging.getLogger(__name__)


class RegistryStateManager:
    """Inspects and repairs a registry document."""

    def __init__(self, state_file: Path, backup_dir: Path):
        self.store = RegistryStore(state_file)
        self.backup_dir = backup_dir

    def get_stats(self) -> Dict[str, Any]:
        """Get statistics for the registry document."""
        state = self.store.load()
        admin_counts = {role: len(data.members) for role, data in state.roles.items()}
        return {
            "tags": {tag: data.tagged_count for tag, data in state.tags.items()},
            "default_items": len(state.default_items),
            "role_members": admin_counts,
            "events": len(state.events),
        }

    def check(self) -> List[str]:
        """Find tags whose count disagrees with their membership."""
        state = self.store.load()
        issues = []
        for tag, data in state.tags.items():
            if data.tagged_count != len(data.items):
                issues.append(f"{tag}: tagged_count={data.tagged_count}, items={len(data.items)}")
        return issues

    def repair(self, dry_run: bool = False) -> List[str]:
        """Reset drifted counts to the size of their membership sets."""
        issues = self.check()
        if not issues or dry_run:
            return issues

        self.store.backup(self.backup_dir)
        state = self.store.load()
        for data in state.tags.values():
            data.tagged_count = len(data.items)
        self.store.save(state)
        logger.info(f"Repaired {len(issues)} tag count(s)")
        return issues

    def grant_admin(self, account: str) -> bool:
        """Grant the default admin role without an authorization check."""
        account = normalize_account(account)
        if self.store.exists:
            self.store.backup(self.backup_dir)
        state = self.store.load()
        roles = RoleAuthority(state, EventLog(state))
        granted = roles.bootstrap_admin(account)
        if granted:
            self.store.save(state)
            logger.info(f"Granted default admin role to {account}")
        else:
            logger.info(f"{account} already holds the default admin role")
        return granted


def main():
    parser = argparse.ArgumentParser(description="Registry state management script")
    parser.add_argument("--state-file", type=Path, default=Path("data/registry_state.json"),
                       help="Registry state document")
    parser.add_argument("--backup-dir", type=Path, default=Path("data/backups"),
                       help="Directory for backups")
    parser.add_argument("--stats", action="store_true",
                       help="Show registry statistics")
    parser.add_argument("--check", action="store_true",
                       help="Check the tag count invariant")
    parser.add_argument("--repair", action="store_true",
                       help="Reset drifted tag counts")
    parser.add_argument("--dry-run", action="store_true",
                       help="Show what would be changed without making changes")
    parser.add_argument("--backup", action="store_true",
                       help="Back up the registry document")
    parser.add_argument("--grant-admin", metavar="ACCOUNT",
                       help="Grant the default admin role to ACCOUNT")

    args = parser.parse_args()

    manager = RegistryStateManager(args.state_file, args.backup_dir)

    if args.stats:
        print(json.dumps(manager.get_stats(), indent=2, ensure_ascii=False))
        return

    if args.check:
        issues = manager.check()
        print(json.dumps({"ok": not issues, "issues": issues}, indent=2, ensure_ascii=False))
        return

    if args.repair:
        issues = manager.repair(args.dry_run)
        print(json.dumps({"repaired": [] if args.dry_run else issues, "issues": issues}, indent=2))
        return

    if args.backup:
        path = manager.store.backup(args.backup_dir)
        print(json.dumps({"backup": str(path) if path else None}))
        return

    if args.grant_admin:
        granted = manager.grant_admin(args.grant_admin)
        print(json.dumps({"granted": granted}))
        return

    parser.print_help()


if __name__ == "__main__":
    main()
