#!/usr/bin/env python3
"""
simulate.py ─ 無畫面批次評估
====================================================================
- 用 AutopilotSensor 自動駕駛跑 N 局，不開視窗、不播音效。
- 每局最多 max_ticks 個 tick，超過記為 timeout（只是評估分類，遊戲本身沒有逾時狀態）。
- 使用 tqdm 顯示進度，最後輸出勝 / 負 / 逾時統計與平均 tick 數。
"""

from __future__ import annotations

import argparse
import logging
import random
from collections import Counter
from typing import Any, Dict, List, Optional

import numpy as np
from tqdm import tqdm

from tilt_space.config import GameConfig, load_settings
from tilt_space.core import RoundFactory, RoundState, SimulationLoop
from tilt_space.host import AutopilotSensor, ManualFrameClock
from tilt_space.logging_config import setup_logging

logger = logging.getLogger("simulate")

TIMEOUT = "timeout"


def play_round(loop: SimulationLoop, clock: ManualFrameClock, pilot: AutopilotSensor,
               max_ticks: int) -> str:
    """跑完一局，回傳 'won' / 'lost' / 'timeout'"""
    while loop.state is RoundState.PLAYING and loop.tick_count < max_ticks:
        pilot.poll(loop.snapshot())
        clock.advance(1)
    if loop.state is RoundState.PLAYING:
        return TIMEOUT
    return loop.state.value


def run_rounds(config: GameConfig, rounds: int, max_ticks: int = 2000,
               noise: float = 0.0, seed: Optional[int] = None,
               show_progress: bool = True) -> Dict[str, Any]:
    """
    批次評估

    Args:
        config: 遊戲參數
        rounds: 局數
        max_ticks: 每局 tick 上限
        noise: 自動駕駛的隨機擾動
        seed: 隨機種子（回合生成與擾動共用）

    Returns:
        {'counts': Counter, 'ticks': list, 'mean_ticks': float, 'win_rate': float}
    """
    rng = random.Random(seed)
    clock = ManualFrameClock()
    pilot = AutopilotSensor(rng=random.Random(rng.random()), noise=noise)
    factory = RoundFactory(config, rng=rng)
    loop = SimulationLoop(config, clock, sensor=pilot, factory=factory)
    loop.start()

    counts: Counter = Counter()
    ticks: List[int] = []
    for index in tqdm(range(rounds), desc="Rounds", disable=not show_progress):
        if index > 0:
            loop.reset()
        result = play_round(loop, clock, pilot, max_ticks)
        counts[result] += 1
        ticks.append(loop.tick_count)
    loop.stop()

    return {
        'counts': counts,
        'ticks': ticks,
        'mean_ticks': float(np.mean(ticks)) if ticks else 0.0,
        'win_rate': counts['won'] / rounds if rounds else 0.0,
    }


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Tilt Space 批次評估")
    parser.add_argument("--config", default="config.yaml", help="配置文件路徑")
    parser.add_argument("--rounds", type=int, default=100)
    parser.add_argument("--max-ticks", type=int, default=2000)
    parser.add_argument("--noise", type=float, default=0.0)
    parser.add_argument("--seed", type=int, default=None)
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    settings = load_settings(args.config)
    setup_logging("WARNING")
    seed = args.seed if args.seed is not None else settings.seed

    stats = run_rounds(settings.game_config(), args.rounds, max_ticks=args.max_ticks,
                       noise=args.noise, seed=seed)

    counts = stats['counts']
    print(f"\n--- {args.rounds} 局結束 ---")
    print(f"勝: {counts['won']}  負: {counts['lost']}  逾時: {counts[TIMEOUT]}")
    print(f"勝率: {stats['win_rate']:.1%}  平均 tick: {stats['mean_ticks']:.1f}")


if __name__ == "__main__":
    main()
