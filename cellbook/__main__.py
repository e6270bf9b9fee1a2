from cellbook.main import main

raise SystemExit(main())
