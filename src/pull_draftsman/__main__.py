from pull_draftsman import main

main()
