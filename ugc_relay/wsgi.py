from ugc_relay.main import create_app

app = create_app()
