from cvs_tag.cli.cli import main

main()
