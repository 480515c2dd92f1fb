from exprcalc.repl import main

if __name__ == "__main__":
    main()
