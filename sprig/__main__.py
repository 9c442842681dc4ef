from sprig.console import main

raise SystemExit(main())
