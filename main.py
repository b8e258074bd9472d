from coffee_warrior.game import main


if __name__ == "__main__":
    main()
