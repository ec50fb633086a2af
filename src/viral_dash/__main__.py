from viral_dash.main import main

main()
