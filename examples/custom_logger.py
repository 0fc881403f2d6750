from redshift import sql
import os
import logging


logger = logging.getLogger("redshift.sql")
logger.setLevel(logging.DEBUG)
fh = logging.FileHandler("redshiftsqllogs.log")
fh.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(process)d %(thread)d %(message)s"))
fh.setLevel(logging.DEBUG)
logger.addHandler(fh)

client = sql.connect(
    workgroup_name=os.getenv("REDSHIFT_WORKGROUP_NAME"),
    database=os.getenv("REDSHIFT_DATABASE", "dev"),
    poll_interval=0.5,
    max_wait_seconds=300,
)

print("executing query: SELECT * FROM svv_tables LIMIT 100")
try:
    result = client.execute_with_result("SELECT * FROM svv_tables LIMIT 100")
    df = result.to_pandas()
    print(df.head())
except sql.ServerOperationError as e:
    print(f"error: {e.context['diagnostic-info']}")
