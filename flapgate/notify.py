from mastodon import Mastodon, MastodonError

from flapgate import config
from flapgate.exceptions import NotificationPublishError, NotifierConfigError
from flapgate.vector import FlapState


def format_message(state, when, name=config.PET_NAME):
    stamp = when.strftime("%H:%M:%S")
    if state is FlapState.OUTSIDE:
        return f"{name} left at {stamp}"
    if state is FlapState.INSIDE:
        return f"{name} has been home since {stamp}"
    raise ValueError(f"no notification for state {state.name}")


def read_access_token(path=config.SECRET_FILE):
    try:
        with open(path, encoding="utf-8") as f:
            token = f.read().strip()
    except (OSError, UnicodeDecodeError) as e:
        raise NotifierConfigError(f"cannot read access token from {path}: {e}") from e
    if not token:
        raise NotifierConfigError(f"access token file {path} is empty")
    return token


class MastodonNotifier:
    """
    Posts public statuses to a Mastodon instance.
    """

    def __init__(self, client):
        self.client = client

    @classmethod
    def from_config(cls, instance=config.MASTODON_INSTANCE, secret_file=config.SECRET_FILE):
        token = read_access_token(secret_file)
        try:
            # no version probe, so building the client never touches the network
            client = Mastodon(access_token=token, api_base_url=instance,
                              version_check_mode="none")
        except MastodonError as e:
            raise NotifierConfigError(f"cannot set up Mastodon client for {instance}: {e}") from e
        return cls(client)

    def publish(self, message):
        try:
            self.client.status_post(message, visibility="public")
        except MastodonError as e:
            raise NotificationPublishError(f"status post failed: {e}") from e
