from ugc_relay.main import create_app
