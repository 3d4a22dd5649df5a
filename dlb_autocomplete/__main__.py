from dlb_autocomplete.cli import main

main()
