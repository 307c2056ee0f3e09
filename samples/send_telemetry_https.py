# -------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License.txt in the project root for
# license information.
# --------------------------------------------------------------------------

import os
import time
import uuid
import logging
from iothub_http_device import DeviceClient, TransportError

logging.basicConfig(level=logging.ERROR)

# The connection string for a device should never be stored in code. For the sake of simplicity we're using an environment variable here.
conn_str = os.getenv("IOTHUB_DEVICE_CONNECTION_STRING")

messages_to_send = 10


def main():
    # The client object is used to interact with your Azure IoT hub.
    with DeviceClient.create_from_connection_string(conn_str) as device_client:

        # Send single messages
        for i in range(1, messages_to_send + 1):
            print("sending message #" + str(i))
            payload = {"id": str(uuid.uuid4()), "temperature": 20 + i, "humidity": 60 + i}
            try:
                result = device_client.send(payload)
            except TransportError as e:
                print("could not reach IoT Hub: {}".format(e))
                continue
            print(result)
            time.sleep(1)

        # Send the same readings as one batch
        print("sending batch of {} messages".format(messages_to_send))
        batch = [{"temperature": 20 + i, "humidity": 60 + i} for i in range(messages_to_send)]
        result = device_client.send(batch, batch=True)
        print(result)


if __name__ == "__main__":
    main()
