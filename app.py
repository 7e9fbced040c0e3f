from src.memory_match.app.entrypoint import main

main()
