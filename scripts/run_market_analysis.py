#!/usr/bin/env python3
"""
Run the default market scenarios from a source checkout.

Usage:
    python scripts/run_market_analysis.py

Output:
    Console report per scenario and MarketData.csv in the current directory
"""

import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from market_model.simulation import main


if __name__ == "__main__":
    main()
