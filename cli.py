# cli.py
import argparse
import json
import logging
import sys
from typing import Any, List

from honeyscan.config import Settings, configure_logging
from honeyscan.core.analyze import build_scanner
from honeyscan.core.controller import ScanController, ViewState
from honeyscan.models import RecentScanEntry, ScanResult
from honeyscan.networks import DEFAULT_NETWORK, NETWORKS, get_network
from honeyscan.utils.addr import autoprefix

logger = logging.getLogger("honeyscan.cli")

ICONS = {"success": "✅", "warning": "⚠️ ", "danger": "🚨"}
BADGES = {"safe": "✅ LOW RISK", "warning": "⚠️  MEDIUM RISK", "danger": "❗ HIGH RISK"}


def _meter(percent: int, width: int = 20) -> str:
    filled = round(width * percent / 100)
    return "[" + "#" * filled + "-" * (width - filled) + f"] {percent}%"


class ConsolePresenter:
    """Prints each view state to out (errors to err); as_json dumps results instead of pretty output."""

    def __init__(self, as_json: bool = False, out=None, err=None):
        self.as_json = as_json
        self.out = out or sys.stdout
        self.err = err or sys.stderr
        self.state = ViewState.IDLE

    def _print(self, *parts: Any) -> None:
        print(*parts, file=self.out)

    def show(self, state: ViewState, payload: Any = None) -> None:
        self.state = state
        if state is ViewState.LOADING and not self.as_json:
            self._print("🔎 Scanning contract...")
        elif state is ViewState.ERROR:
            print(f"❌ {payload}", file=self.err)
        elif state is ViewState.RESULTS:
            self._show_result(payload)

    def _show_result(self, result: ScanResult) -> None:
        if self.as_json:
            self._print(json.dumps(result.model_dump(), indent=2))
            return
        a = result.assessment
        self._print(f"Contract: {result.short_address}  Network: {result.network_name}")
        if result.source == "fallback":
            self._print("ℹ️ Risk API unreachable, showing offline demo data.")
        self._print(BADGES.get(a.level, a.label))
        self._print(f"🧮 Risk Score: {a.score}  {_meter(a.meter_percent)}")
        for f in result.findings:
            self._print(f"{ICONS.get(f.severity, '•')} {f.title}: {f.description}")
        self._print(f"🔗 {result.explorer_link}")

    def render_recent(self, entries: List[RecentScanEntry]) -> None:
        if self.as_json:
            return
        if not entries:
            self._print("No recent scans yet")
            return
        self._print("Recent scans:")
        for i, e in enumerate(entries):
            name = NETWORKS[e.network].name if e.network in NETWORKS else e.network
            self._print(f"  {i}. {e.address}  ({name})")


def cmd_scan(args, scanner) -> int:
    presenter = ConsolePresenter(as_json=args.json)
    controller = ScanController(scanner, presenter)
    controller.handle_scan(autoprefix(args.address), args.network)
    return 0 if controller.state is ViewState.RESULTS else 1


def cmd_recent(args, scanner) -> int:
    entries = scanner.recent_scans()
    if args.json:
        print(json.dumps([e.model_dump() for e in entries], indent=2))
    else:
        ConsolePresenter().render_recent(entries)
    return 0


def cmd_networks(args, scanner) -> int:
    for key in NETWORKS:
        n = get_network(key)
        print(f"{n.key:<5} chainId={n.chain_id:<5} {n.name}  {n.explorer_url}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Honeyscan - contract honeypot risk scanner")
    sub = p.add_subparsers(dest="command", required=True)

    s = sub.add_parser("scan", help="Scan one contract address")
    s.add_argument("--network", default=DEFAULT_NETWORK, choices=list(NETWORKS), help="Network key")
    s.add_argument("--address", required=True, help="Contract address (0x + 40 hex)")
    s.add_argument("--json", action="store_true", help="Print JSON only")
    s.set_defaults(func=cmd_scan)

    r = sub.add_parser("recent", help="List recent scans")
    r.add_argument("--json", action="store_true", help="Print JSON only")
    r.set_defaults(func=cmd_recent)

    n = sub.add_parser("networks", help="List supported networks")
    n.set_defaults(func=cmd_networks)
    return p


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    settings = Settings.from_env()
    configure_logging("WARNING" if getattr(args, "json", False) else settings.log_level)
    logger.info("[CLI] command=%s data_dir=%s fallback=%s", args.command, settings.data_dir, settings.fallback_enabled)
    scanner = build_scanner(settings)
    return args.func(args, scanner)


if __name__ == "__main__":
    sys.exit(main())
