from state_emitter.cli import main

main()
