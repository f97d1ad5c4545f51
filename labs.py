# -*- coding: utf-8 -*-
"""
Docker lab exercises: named volume persistence and container name resolution
on a private network. Talks to the local daemon through the docker SDK.
Both labs default to the web image built by docker compose.

    docker compose build
    python labs.py volume
    python labs.py network
"""

import argparse
import logging

import docker
from docker.errors import APIError, ContainerError, DockerException

# image: tag of the web service in docker-compose.yml
HANDLER_IMAGE = "docker-labs-web"
DATA_DIR = "/app/data"


def _remove_quietly(resource, **kwargs):
    """Remove a container/volume/network, logging instead of raising on failure."""
    try:
        resource.remove(**kwargs)
    except APIError as e:
        logging.warning(f"Could not remove {getattr(resource, 'name', resource)}: {e}")

# ----------------------------------------------------------
# Lab 1: volumes
# ----------------------------------------------------------

def volume_persistence_lab(client=None, volume="lab_data", image=HANDLER_IMAGE, payload="test data", keep=False):
    """Write through one container, remove it, read back through a fresh one."""
    client = client or docker.from_env()
    mounts = {volume: {"bind": DATA_DIR, "mode": "rw"}}
    write_cmd = ["sh", "-c", f'printf "%s\\n" "$PAYLOAD" > {DATA_DIR}/test.txt']

    lab_volume = client.volumes.create(name=volume)
    try:
        writer = client.containers.run(
            image, write_cmd,
            name=f"{volume}_writer",
            environment={"PAYLOAD": payload},
            volumes=mounts,
            detach=True,
        )
        try:
            status = writer.wait()["StatusCode"]
            if status != 0:
                raise ContainerError(writer, status, write_cmd, image, writer.logs(stdout=False, stderr=True))
        finally:
            _remove_quietly(writer, force=True)

        output = client.containers.run(image, ["cat", f"{DATA_DIR}/test.txt"], volumes=mounts, remove=True)
    finally:
        if not keep:
            _remove_quietly(lab_volume, force=True)

    content = output.decode("utf-8").strip()
    logging.info(f"Read back from {volume}: {content!r}")
    return content

# ----------------------------------------------------------
# Lab 2: networks
# ----------------------------------------------------------

def network_resolution_lab(client=None, network="lab_net", image=HANDLER_IMAGE, server="lab_server"):
    """Return True if a container on `network` can resolve `server` by name."""
    client = client or docker.from_env()
    resolve_cmd = ["python", "-c", f"import socket; print(socket.gethostbyname('{server}'))"]

    lab_network = client.networks.create(network, driver="bridge")
    try:
        server_container = client.containers.run(
            image, ["sleep", "300"], name=server, network=network, detach=True
        )
        try:
            address = client.containers.run(image, resolve_cmd, network=network, remove=True)
        except ContainerError as e:
            logging.error(f"Could not resolve {server} on {network}: {e}")
            return False
        finally:
            _remove_quietly(server_container, force=True)
        logging.info(f"{server} resolved to {address.decode('utf-8').strip()} on {network}")
        return True
    finally:
        _remove_quietly(lab_network)

# ----------------------------------------------------------
# CLI
# ----------------------------------------------------------

def main(argv=None):
    parser = argparse.ArgumentParser(description="Docker volume / network labs")
    parser.add_argument("lab", choices=["volume", "network"])
    parser.add_argument("--image", default=HANDLER_IMAGE)
    parser.add_argument("--keep", action="store_true", help="keep the lab volume afterwards")
    args = parser.parse_args(argv)

    try:
        client = docker.from_env()
        if args.lab == "volume":
            ok = volume_persistence_lab(client, image=args.image, keep=args.keep) == "test data"
        else:
            ok = network_resolution_lab(client, image=args.image)
    except (ContainerError, APIError, DockerException) as e:
        logging.error(f"{args.lab} lab aborted: {e}")
        return 1

    logging.info(f"{'✅' if ok else '❌'} {args.lab} lab {'passed' if ok else 'failed'}")
    return 0 if ok else 1


if __name__ == "__main__":
    logging.basicConfig(
        level=logging.INFO,
        format='[%(asctime)s] %(levelname)s: %(message)s'
    )
    raise SystemExit(main())
