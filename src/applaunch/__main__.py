from applaunch import cli

raise SystemExit(cli.main())
