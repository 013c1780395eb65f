from project_init.cli import main

raise SystemExit(main())
