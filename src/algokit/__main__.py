from algokit.demo import main

main()
