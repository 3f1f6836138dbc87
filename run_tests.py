#!/usr/bin/env python3
"""
テスト実行スクリプト
Group-by-layer unittest runner with a synthetic end-to-end check
"""

import os
import sys
import time
import unittest
from datetime import datetime

PROJECT_ROOT = os.path.dirname(os.path.abspath(__file__))


# カラー出力用のANSIコード
class Colors:
    GREEN = '\033[92m'
    RED = '\033[91m'
    YELLOW = '\033[93m'
    BLUE = '\033[94m'
    RESET = '\033[0m'
    BOLD = '\033[1m'


TEST_GROUPS = [
    ("Core data model and validation", "tests/core"),
    ("Model fitting and selection", "tests/fitting"),
    ("Forecasting", "tests/forecasting"),
    ("Batch analysis and comparison", "tests/analysis"),
    ("Configuration", "tests/config"),
    ("Errors and logging", "tests/infrastructure"),
]


def print_header():
    """ヘッダー表示"""
    print(f"{Colors.BOLD}{'=' * 70}{Colors.RESET}")
    print(f"{Colors.BOLD}🧪 Citation Forecast - test suite{Colors.RESET}")
    print(f"{Colors.BOLD}{'=' * 70}{Colors.RESET}")
    print(f"Started: {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}")
    print()


def run_group(name: str, directory: str) -> bool:
    print(f"  • {name}...", end='', flush=True)

    suite = unittest.defaultTestLoader.discover(
        os.path.join(PROJECT_ROOT, directory),
        top_level_dir=PROJECT_ROOT
    )
    with open(os.devnull, 'w') as devnull:
        result = unittest.TextTestRunner(stream=devnull).run(suite)

    if result.wasSuccessful():
        print(f" {Colors.GREEN}✓ {result.testsRun} passed{Colors.RESET}")
        return True

    problems = result.failures + result.errors
    print(f" {Colors.RED}✗ {len(problems)} of {result.testsRun} failed{Colors.RESET}")
    for test, traceback in problems:
        print(f"    - {test}: {traceback.strip().splitlines()[-1][:80]}")
    return False


def run_unit_tests(results: dict):
    print(f"{Colors.BLUE}📋 1. Unit tests{Colors.RESET}")
    print("-" * 50)
    for name, directory in TEST_GROUPS:
        results[name] = run_group(name, directory)


def run_integration_test() -> bool:
    """統合テスト - 合成データでのエンドツーエンド"""
    print(f"\n{Colors.BLUE}📋 2. End-to-end synthetic batch{Colors.RESET}")
    print("-" * 50)

    import numpy as np
    from citation_forecast import analyze

    years = range(2000, 2011)
    histories = {
        'linear': [(year, 5 * year - 9990) for year in years],
        'exponential': [(year, 20.0 * np.exp(0.3 * (year - 2000))) for year in years],
        'asymptotic': [(year, 500.0 * (1 - np.exp(-0.4 * (year - 2000)))) for year in years],
    }

    batch = analyze(histories, year_range=(2000, 2010))
    all_passed = not batch.failures
    for entity_id, result in batch.results.items():
        passed = result.best_model.value == entity_id
        all_passed = all_passed and passed
        status = f"{Colors.GREEN}✓{Colors.RESET}" if passed else f"{Colors.RED}✗{Colors.RESET}"
        print(f"  {status} {entity_id}: selected {result.best_model.label}, "
              f"{result.predicted[0].year} forecast={result.predicted[0].citation_count:.2f}")

    return all_passed


def print_summary(results: dict):
    """結果サマリー表示"""
    print(f"\n{Colors.BOLD}{'=' * 70}{Colors.RESET}")
    print(f"{Colors.BOLD}📊 Summary{Colors.RESET}")
    print(f"{Colors.BOLD}{'=' * 70}{Colors.RESET}")

    total = len(results)
    passed = sum(1 for r in results.values() if r)

    print(f"Groups: {total}")
    print(f"Passed: {Colors.GREEN}{passed}{Colors.RESET}")
    print(f"Failed: {Colors.RED}{total - passed}{Colors.RESET}")

    if passed != total:
        print("Failed groups:")
        for name, result in results.items():
            if not result:
                print(f"  - {name}")


def main():
    """メイン実行関数"""
    sys.path.insert(0, PROJECT_ROOT)
    print_header()

    results = {}
    start_time = time.time()

    run_unit_tests(results)
    results["End-to-end"] = run_integration_test()

    elapsed_time = time.time() - start_time
    print_summary(results)
    print(f"\nElapsed: {elapsed_time:.2f}s")

    return 0 if all(results.values()) else 1


if __name__ == "__main__":
    sys.exit(main())
