"""CLI entry point: python main.py --trading-mode demo"""

from etoro_mcp.cli import main

if __name__ == "__main__":
    main()
