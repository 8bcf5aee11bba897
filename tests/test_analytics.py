from signal_engine.services.feedback import SEED_SAMPLES


def post(client, text="Some feedback"):
    resp = client.post(
        "/feedback",
        json={"text": text, "source": "Support", "timestamp": "2024-05-01T10:00:00Z"},
    )
    assert resp.status_code == 200
    return resp


def test_stats_on_empty_store(client):
    resp = client.get("/stats")
    assert resp.status_code == 200
    assert resp.json() == {
        "total": 0,
        "high_urgency": 0,
        "critical": 0,
        "negative": 0,
        "summary": "Feedback volume is low risk.",
    }


def test_stats_report_negative_trend(client, fake_classifier):
    fake_classifier.push(theme="UI/UX", urgency="Low", severity="Minor", sentiment="Negative")
    fake_classifier.push(theme="UI/UX", urgency="High", severity="Minor", sentiment="Negative")
    fake_classifier.push(theme="Bug", urgency="Low", severity="Minor", sentiment="Positive")
    for _ in range(3):
        post(client)

    assert client.get("/stats").json() == {
        "total": 3,
        "high_urgency": 1,
        "critical": 0,
        "negative": 2,
        "summary": "User sentiment is trending negative.",
    }


def test_stats_report_urgent_issues(client, fake_classifier):
    fake_classifier.push(theme="Bug", urgency="Low", severity="Critical", sentiment="Neutral")
    fake_classifier.push(theme="Bug", urgency="Low", severity="Minor", sentiment="Negative")
    post(client)
    post(client)

    body = client.get("/stats").json()
    assert body["negative"] == 1
    assert body["critical"] == 1
    assert body["summary"] == "Urgent issues detected that may require prioritization."


def test_clusters_on_empty_store(client):
    resp = client.get("/clusters")
    assert resp.status_code == 200
    assert resp.json() == {"top_problem": None, "clusters": []}


def test_single_critical_bug_cluster(client, fake_classifier):
    fake_classifier.push(theme="Bug", urgency="High", severity="Critical", sentiment="Negative")
    post(client, "Bug in report generation")

    body = client.get("/clusters").json()
    expected = {
        "theme": "Bug",
        "coverage": 1,
        "avg_urgency": 3.0,
        "avg_severity": 3.0,
        "priority": 9.0,
        "insight": "Recurring user feedback detected.",
        "recommendation": "Monitor and review in upcoming sprint.",
    }
    assert body == {"top_problem": expected, "clusters": [expected]}


def test_clusters_ranked_by_priority(client, fake_classifier):
    for _ in range(3):
        fake_classifier.push(
            theme="Performance", urgency="High", severity="Critical", sentiment="Negative"
        )
    fake_classifier.push(theme="Other", urgency="Medium", severity="Moderate", sentiment="Neutral")
    fake_classifier.push(theme="Documentation", urgency="Low", severity="Moderate", sentiment="Neutral")
    fake_classifier.push(theme="Documentation", urgency="Medium", severity="Minor", sentiment="Neutral")
    for _ in range(6):
        post(client)

    body = client.get("/clusters").json()
    clusters = body["clusters"]
    assert [c["theme"] for c in clusters] == ["Performance", "Documentation", "Other"]
    assert body["top_problem"] == clusters[0]

    performance, documentation, other = clusters
    assert performance["priority"] == 27.0
    assert performance["insight"] == "High-impact issue affecting multiple users."
    assert performance["recommendation"] == "Prioritize investigation and remediation."

    assert other["priority"] == 4.0
    assert other["insight"] == "Large volume of uncategorized feedback suggests taxonomy gaps."

    assert documentation["coverage"] == 2
    assert documentation["avg_urgency"] == 1.5
    assert documentation["avg_severity"] == 1.5
    assert documentation["priority"] == 4.5
    assert documentation["insight"] == "Recurring user feedback detected."


def test_seed_populates_store(client, fake_classifier):
    themes = ["Authentication", "Integration", "Performance", "Performance",
              "Documentation", "UI/UX", "Feature Request", "Bug"]
    for theme in themes:
        fake_classifier.push(theme=theme, urgency="Medium", severity="Moderate", sentiment="Neutral")

    resp = client.get("/seed")
    assert resp.status_code == 200
    assert resp.json() == {"status": "seeded", "count": 8}
    assert fake_classifier.calls == [text for text, _ in SEED_SAMPLES]

    assert client.get("/stats").json()["total"] == 8
    clusters = client.get("/clusters").json()["clusters"]
    assert len(clusters) == len(set(themes))


def test_seed_without_classifier_collapses_to_other(client):
    assert client.get("/seed").json() == {"status": "seeded", "count": 8}

    clusters = client.get("/clusters").json()["clusters"]
    assert len(clusters) == 1
    assert clusters[0]["theme"] == "Other"
    assert clusters[0]["coverage"] == 8
    assert clusters[0]["priority"] == 32.0
