from netbar.cli import main

raise SystemExit(main())
