from plant_server import create_app

# Initialize Flask app (reads GEMINI_API_KEY from the environment or .env)
app = create_app()

if __name__ == '__main__':
    app.run(debug=True)
