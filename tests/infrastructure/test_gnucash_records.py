"""Tests for the shared GnuCash record mapping."""

from ledgerfx.domain.models.ledger import TransactionStatus
from ledgerfx.infrastructure.gnucash_records import (
    AccountNode,
    build_account_paths,
    reconcile_status,
)


def test_build_account_paths_joins_names_below_root() -> None:
    """Paths start below the root and skip template accounts."""
    accounts = [
        AccountNode("root", "Root Account", None, "ROOT"),
        AccountNode("assets", "Assets", "root", "ASSET"),
        AccountNode("bank", "Bank", "assets", "BANK"),
        AccountNode("checking", "Checking", "bank", "BANK"),
        AccountNode("troot", "Template Root", None, "ROOT"),
        AccountNode("tmpl", "B13E492052BF4ACFAF4BD739B1351B5D", "troot", "BANK"),
        AccountNode("orphan", "Orphan", "missing", "BANK"),
    ]

    paths = build_account_paths(accounts)

    assert paths == {
        "assets": "Assets",
        "bank": "Assets:Bank",
        "checking": "Assets:Bank:Checking",
        "orphan": "Orphan",
    }


def test_reconcile_status_maps_gnucash_flags() -> None:
    """Reconciled is cleared, cleared is pending, the rest has no status."""
    assert reconcile_status("y") is TransactionStatus.CLEARED
    assert reconcile_status("c") is TransactionStatus.PENDING
    assert reconcile_status("n") is None
    assert reconcile_status("v") is None
    assert reconcile_status(None) is None
