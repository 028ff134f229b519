from pizzastore.cli import main

main()
