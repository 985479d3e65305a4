from mirrord_tomcat.cli import main

raise SystemExit(main())
