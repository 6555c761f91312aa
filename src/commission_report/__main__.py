import sys

from commission_report.cli import main

sys.exit(main())
