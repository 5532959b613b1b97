from htmxdemo._cli import main

main()
