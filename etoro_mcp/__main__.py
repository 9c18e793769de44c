from etoro_mcp.cli import main

main()
