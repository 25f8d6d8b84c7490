

def test_landing_fallback_text(client):
    response = client.get('/')
    assert response.status_code == 200
    assert response.mimetype == 'text/plain'
    assert response.get_data(as_text=True) == "Plant Analysis API is live. Use /analyze or /download routes."


def test_landing_serves_index_html(app, client):
    with open(f"{app.static_folder}/index.html", "w") as f:
        f.write("<h1>Plant Analyzer</h1>")

    response = client.get('/')
    assert response.status_code == 200
    assert response.mimetype == 'text/html'
    assert b"Plant Analyzer" in response.data


def test_static_files_served_from_root(app, client):
    with open(f"{app.static_folder}/app.js", "w") as f:
        f.write("console.log('ok');")

    response = client.get('/app.js')
    assert response.status_code == 200
    assert b"console.log" in response.data
