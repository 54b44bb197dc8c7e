from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from tierwise.core.errors import TierwiseError
from tierwise.core.logging import configure_logging
from tierwise.services.ingestion import build_analysis_inputs, parse_analysis_request
from tierwise.services.policy.analysis import run_full_analysis
from tierwise.services.reporting import blueprint_markdown, build_summary


logger = logging.getLogger("tierwise.run_analysis")


def main() -> int:
    parser = argparse.ArgumentParser(description="Recommend access tiers for a SaaS portfolio")
    parser.add_argument("request", type=Path, help="JSON file with organization, scenario and app_ids/apps")
    parser.add_argument("--json-out", type=Path, default=None, help="Write the full result as JSON")
    parser.add_argument("--md-out", type=Path, default=None, help="Write a markdown access blueprint")
    args = parser.parse_args()

    configure_logging()
    try:
        payload = json.loads(args.request.read_text(encoding="utf-8"))
        inputs = build_analysis_inputs(parse_analysis_request(payload))
    except (OSError, ValueError, TierwiseError) as exc:
        logger.error("invalid_request path=%s error=%s", args.request, exc)
        errors = getattr(exc, "errors", None)
        if errors:
            print(json.dumps(errors, indent=2, default=str), file=sys.stderr)
        return 2

    result = run_full_analysis(inputs.organization, inputs.scenario, inputs.selected_apps)
    document = {"result": result.to_dict(), "summary": build_summary(result)}

    if args.json_out is not None:
        args.json_out.parent.mkdir(parents=True, exist_ok=True)
        args.json_out.write_text(json.dumps(document, indent=2), encoding="utf-8")
        print(args.json_out)
    if args.md_out is not None:
        args.md_out.parent.mkdir(parents=True, exist_ok=True)
        args.md_out.write_text(blueprint_markdown(result), encoding="utf-8")
        print(args.md_out)
    if args.json_out is None and args.md_out is None:
        print(blueprint_markdown(result))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
