import sys

from shopify_admin.main import main

sys.exit(main())
