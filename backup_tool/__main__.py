from backup_tool.cli import main

raise SystemExit(main())
