from rcat.cli import main

main()
