from cms_backend.cli import main

raise SystemExit(main())
