from frustration_alerts.controller import create_app
from frustration_alerts.constants import APP_PORT, DEBUG_MODE


app = create_app()

if __name__ == '__main__':
    app.run(host='0.0.0.0', port=APP_PORT, debug=DEBUG_MODE)
