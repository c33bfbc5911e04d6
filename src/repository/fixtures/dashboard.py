import datetime

from src.models.db.dashboard import DashboardChart, RecentActivity, SystemAlert


def seed_charts() -> list[DashboardChart]:
    return [
        DashboardChart(
            id="interviews-monthly",
            title="Colloqui Mensili",
            type="line",
            period="month",
            data={
                "labels": ["Gen", "Feb", "Mar", "Apr", "Mag", "Giu"],
                "datasets": [
                    {
                        "label": "Colloqui Completati",
                        "data": [12, 19, 8, 15, 22, 13],
                        "border_color": "#004d73",
                        "fill": False,
                    }
                ],
            },
        ),
        DashboardChart(
            id="evaluations-status",
            title="Stato Valutazioni",
            type="doughnut",
            period="week",
            data={
                "labels": ["Completate", "In Corso", "In Attesa"],
                "datasets": [
                    {
                        "label": "Valutazioni",
                        "data": [45, 25, 30],
                        "background_color": ["#0a8228", "#004d73", "#ffc107"],
                    }
                ],
            },
        ),
        DashboardChart(
            id="candidate-flow",
            title="Flusso Candidati",
            type="bar",
            period="month",
            data={
                "labels": ["Screening", "Tecnico", "HR", "Finale"],
                "datasets": [{"label": "Candidati", "data": [85, 65, 45, 28], "background_color": ["#004d73"]}],
            },
        ),
    ]


def seed_alerts(now: datetime.datetime) -> list[SystemAlert]:
    return [
        SystemAlert(
            id="1",
            type="warning",
            title="Server Backup",
            message="Il backup automatico è stato completato con alcuni avvisi",
            timestamp=now - datetime.timedelta(hours=2),
        ),
        SystemAlert(
            id="2",
            type="info",
            title="Aggiornamento Sistema",
            message="Nuovo aggiornamento disponibile per il sistema di valutazione",
            timestamp=now - datetime.timedelta(hours=5),
        ),
    ]


def seed_recent_activity(now: datetime.datetime) -> list[RecentActivity]:
    return [
        RecentActivity(
            id="1",
            type="interview",
            description="Colloquio tecnico completato per Mario Rossi",
            timestamp=now - datetime.timedelta(minutes=30),
            user="Giovanni Bianchi",
        ),
        RecentActivity(
            id="2",
            type="evaluation",
            description="Valutazione finale inviata per Laura Verdi",
            timestamp=now - datetime.timedelta(hours=1),
            user="Marco Neri",
        ),
        RecentActivity(
            id="3",
            type="user",
            description="Nuovo utente registrato: Sara Blu",
            timestamp=now - datetime.timedelta(hours=2),
            user="Sistema",
        ),
    ]
