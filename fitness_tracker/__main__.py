from fitness_tracker.main import main

raise SystemExit(main())
