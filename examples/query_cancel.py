from redshift import sql
import os, threading

"""
A statement that is still running can be abandoned by setting the cancel event
passed to the client. The client stops waiting, asks Redshift to cancel the
statement and raises OperationCancelledError.
"""

client = sql.connect(
    workgroup_name=os.getenv("REDSHIFT_WORKGROUP_NAME"),
    database=os.getenv("REDSHIFT_DATABASE", "dev"),
)

cancel_event = threading.Event()
threading.Timer(15, cancel_event.set).start()

print("\n Beginning to execute long query, cancelling in 15 seconds")
try:
    client.execute_with_result(
        "SELECT COUNT(*) FROM stv_blocklist a CROSS JOIN stv_blocklist b",
        cancel_event=cancel_event,
    )
except sql.OperationCancelledError as e:
    print("\n The query was cancelled: {}".format(e.message_with_context()))
