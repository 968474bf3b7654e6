from route_summary.cli import main

main()
