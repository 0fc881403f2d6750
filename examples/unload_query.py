from redshift import sql
import os

"""
UNLOAD writes the result of a query to S3 instead of returning it. The client
waits until the export has finished and returns the statement id.
"""

client = sql.connect(
    workgroup_name=os.getenv("REDSHIFT_WORKGROUP_NAME"),
    database=os.getenv("REDSHIFT_DATABASE", "dev"),
)

query = "SELECT id, temperature, humidity FROM dev.public.weather"
option = sql.UnloadOption.default(os.getenv("REDSHIFT_UNLOAD_S3_PATH"))

print(sql.build_unload_query(query, option))

statement_id = client.execute_unload_and_wait(query, option)
print("statement id: ", statement_id)
