#!/usr/bin/env python3
"""
Runs a career path simulation from a JSON request file and prints the result.

    python scripts/run_simulation.py request.json [seed]

No database is touched: the request must already carry resolved roles.
"""
import json
import os
import random
import sys
from dotenv import load_dotenv

# Try to load .env from current directory or parent directory
load_dotenv()
sys.path.append(os.getcwd())

from app.main import configure_logging
from app.core.exceptions import CareerSimulationError
from app.services.career_simulation_engine import career_simulation_engine
from app.services.career_simulation_service import career_simulation_service, parse_simulation_request

def print_header(msg):
    print(f"\n{'='*60}\n{msg}\n{'='*60}", file=sys.stderr)

def main(argv=None):
    argv = argv if argv is not None else sys.argv[1:]
    if not argv:
        print("usage: run_simulation.py <request.json> [seed]", file=sys.stderr)
        return 2

    configure_logging()

    with open(argv[0]) as f:
        payload = json.load(f)
    seed = int(argv[1]) if len(argv) > 1 else None

    try:
        request = parse_simulation_request(payload)
        current_role = career_simulation_service.enrich_current_role(request.current_role, None)
        simulation = career_simulation_engine.simulate(
            current_role=current_role,
            target_roles=request.target_roles,
            time_horizon=request.time_horizon,
            success_criteria=request.success_criteria,
            rng=random.Random(seed)
        )
    except CareerSimulationError as e:
        print_header("SIMULATION FAILED")
        print(e.message, file=sys.stderr)
        return 1

    print_header(f"RECOMMENDED: {simulation.recommended_path.path_id}")
    print(simulation.model_dump_json(by_alias=True, indent=2))
    return 0

if __name__ == "__main__":
    sys.exit(main())
