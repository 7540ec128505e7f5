from bim_inner_join.cli import main

main()
