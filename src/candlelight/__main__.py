from candlelight.cli import main

main()
