from rising_drops.app import main


if __name__ == "__main__":
    main()
