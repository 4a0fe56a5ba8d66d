# /experiments/sanity_rollout.py
"""
Baseline rollouts for CronusCashEnv.

Plays full sessions with a uniform-random policy and a greedy coin chaser,
appends one summary row per session to <out-dir>/episodes.csv and, with
--save-traces, dumps each session's actions as an int8 .npy array so the
run can be replayed through the env with the same seed.

  python -m experiments.sanity_rollout
  python -m experiments.sanity_rollout --policies chaser --seeds 7,8,9
  python -m experiments.sanity_rollout --policies random --steps 300 --out-dir /tmp/cc
"""

from __future__ import annotations
import argparse
import csv
import json
from pathlib import Path
from typing import Callable, Dict, List, Sequence

import numpy as np

from cronus_cash.env.cc_env import CronusCashEnv, MOVE_NONE, MOVE_LEFT, MOVE_RIGHT
from cronus_cash.game.config import FPS

Policy = Callable[[np.ndarray], np.ndarray]

SUMMARY_FIELDS = [
    "policy", "seed", "frame_skip", "decisions",
    "return", "coins", "terminated", "truncated",
]


def make_random_policy(seed: int) -> Policy:
    rng = np.random.RandomState(seed)

    def act(_obs: np.ndarray) -> np.ndarray:
        return np.array([rng.randint(0, 3), rng.randint(0, 2)], dtype=np.int64)
    return act


def make_coin_chaser() -> Policy:
    """Steer toward the coin; jump while it is above and a jump is still available."""
    def act(obs: np.ndarray) -> np.ndarray:
        dx, dy, jumps_left = obs[8], obs[9], obs[6]
        move = MOVE_NONE
        if dx > 0.01:
            move = MOVE_RIGHT
        elif dx < -0.01:
            move = MOVE_LEFT
        jump = int(dy < -0.05 and jumps_left > 0.0)
        return np.array([move, jump], dtype=np.int64)
    return act


POLICIES: Dict[str, Callable[[int], Policy]] = {
    "random": lambda seed: make_random_policy(10_000 + seed),
    "chaser": lambda _seed: make_coin_chaser(),
}


def play_session(policy: Policy, seed: int, frame_skip: int, max_decisions: int):
    """One env session. Returns (summary dict, list of actions)."""
    env = CronusCashEnv(frame_skip=frame_skip, max_decisions=max_decisions)
    actions: List[np.ndarray] = []
    total = 0.0
    term = trunc = False
    try:
        obs, info = env.reset(seed=seed)
        while not (term or trunc):
            a = policy(obs)
            actions.append(a)
            obs, r, term, trunc, info = env.step(a)
            total += float(r)
    finally:
        env.close()

    summary = {
        "seed": seed,
        "frame_skip": frame_skip,
        "decisions": len(actions),
        "return": round(total, 2),
        "coins": int(info.get("coins", 0)),
        "terminated": int(term),
        "truncated": int(trunc),
    }
    return summary, actions


def append_summary(csv_path: Path, summary: dict):
    new_file = not csv_path.exists()
    with csv_path.open("a", newline="") as f:
        w = csv.DictWriter(f, fieldnames=SUMMARY_FIELDS)
        if new_file:
            w.writeheader()
        w.writerow(summary)


def save_trace(trace_dir: Path, summary: dict, actions: Sequence[np.ndarray]):
    trace_dir.mkdir(parents=True, exist_ok=True)
    stem = f"seed{summary['seed']}"
    np.save(trace_dir / f"{stem}.npy", np.asarray(actions, dtype=np.int8))
    (trace_dir / f"{stem}.json").write_text(json.dumps(summary, indent=2), encoding="utf-8")


def parse_seeds(text: str) -> List[int]:
    seeds = [int(s) for s in text.split(",") if s.strip()]
    return seeds or list(range(101, 111))


def main():
    ap = argparse.ArgumentParser(description="Play baseline Cronus Cash sessions and log the results.")
    ap.add_argument("--policies", choices=["random", "chaser", "both"], default="both")
    ap.add_argument("--seeds", default="", help="e.g. 1,2,3 (default: 101-110)")
    ap.add_argument("--frame-skip", type=int, default=4)
    ap.add_argument("--steps", type=int, default=10_000,
                    help="decision cap per session; the 120 s clock normally ends it first")
    ap.add_argument("--out-dir", default="experiments/runs")
    ap.add_argument("--save-traces", action="store_true", help="also write <policy>/seedN.npy action arrays")
    args = ap.parse_args()

    out_dir = Path(args.out_dir)
    out_dir.mkdir(parents=True, exist_ok=True)
    csv_path = out_dir / "episodes.csv"
    seeds = parse_seeds(args.seeds)
    names = list(POLICIES) if args.policies == "both" else [args.policies]

    print(f"{len(names)} policies x {len(seeds)} seeds, "
          f"{FPS / max(1, args.frame_skip):.1f} decisions/s -> {csv_path}")

    for name in names:
        for seed in seeds:
            summary, actions = play_session(POLICIES[name](seed), seed, args.frame_skip, args.steps)
            summary["policy"] = name
            append_summary(csv_path, summary)
            if args.save_traces:
                save_trace(out_dir / "traces" / name, summary, actions)
            print(f"{name:>7} seed {seed:>5}: {summary['coins']:3d} coins "
                  f"in {summary['decisions']} decisions (return {summary['return']})")


if __name__ == "__main__":
    main()
