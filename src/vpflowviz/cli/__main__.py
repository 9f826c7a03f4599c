import sys

from vpflowviz.cli.run_flowviz import main

sys.exit(main())
