from redshift import sql
import os

client = sql.connect(
    workgroup_name=os.getenv("REDSHIFT_WORKGROUP_NAME"),
    database=os.getenv("REDSHIFT_DATABASE", "dev"),
    poll_interval=1.0,
)

query = "SELECT id, temperature, humidity FROM {}".format(
    os.getenv("WEATHER_TABLE", "dev.public.weather")
)
print("query: ", query)

result = client.execute_with_result(query)

for weather in result:
    print(
        "ID: {id}, Temperature: {temperature}, Humidity: {humidity}".format(**weather)
    )
