from repoai.cli import main

raise SystemExit(main())
