from datetime import date

import pytest

from lexflow import config, projections
from lexflow.models import LegalArea, OSStatus, ServiceOrder


@pytest.fixture
def orders():
    return [ServiceOrder.from_dict(o) for o in config.INITIAL_SERVICE_ORDERS]


def _order(id, status, created, updated, value=0.0):
    return ServiceOrder(id=id, os_number=f"OS-2024-{id}", client_name="X", status=status,
                        created_at=created, updated_at=updated, value=value)


class TestDashboard:
    def test_stats(self, orders):
        stats = projections.dashboard_stats(orders)

        assert stats == {"total": 4, "open": 1, "in_progress": 2, "completed": 1}

    def test_buckets_cover_every_status(self):
        orders = [_order(str(i), s, "2024-01-01", "2024-01-02") for i, s in enumerate(OSStatus)]

        stats = projections.dashboard_stats(orders)

        assert stats["open"] + stats["in_progress"] + stats["completed"] == stats["total"] == 5

    def test_legacy_status_counts_only_in_total(self):
        legacy = ServiceOrder.from_dict({"id": "9", "osNumber": "OS-2023-9", "status": "Suspensa"})
        orders = [legacy, _order("1", OSStatus.ABERTA, "2024-01-01", "2024-01-01")]

        stats = projections.dashboard_stats(orders)

        assert stats == {"total": 2, "open": 1, "in_progress": 0, "completed": 0}
        assert stats["open"] + stats["in_progress"] + stats["completed"] < stats["total"]

    def test_text_filter_is_case_insensitive_on_three_fields(self, orders):
        by_client = projections.filter_orders(orders, "mariana")
        by_number = projections.filter_orders(orders, "os-2024-003")
        by_responsible = projections.filter_orders(orders, "RODRIGO")

        assert [o.id for o in by_client] == ["2"]
        assert [o.id for o in by_number] == ["3"]
        assert [o.id for o in by_responsible] == ["1", "3"]

    def test_empty_text_and_all_sentinels_keep_everything(self, orders):
        assert projections.filter_orders(orders, "", config.FILTER_ALL, config.FILTER_ALL) == orders

    def test_filters_combine_with_and(self, orders):
        result = projections.filter_orders(orders, "rodrigo", status="Aberta", area=config.FILTER_ALL)
        assert [o.id for o in result] == ["3"]

        result = projections.filter_orders(orders, "rodrigo", status=config.FILTER_ALL, area=LegalArea.CIVEL)
        assert result == []


class TestReportFilter:
    def test_inclusive_date_range(self, orders):
        result = projections.filter_report(orders, start="2024-10-01", end="2024-10-10")

        assert [o.id for o in result] == ["1", "2"]

    def test_open_ended_bounds(self, orders):
        assert [o.id for o in projections.filter_report(orders, start=date(2024, 10, 10))] == ["2", "3"]
        assert [o.id for o in projections.filter_report(orders, end=date(2024, 9, 30))] == ["4"]

    def test_timestamp_on_end_day_is_included(self):
        order = _order("9", OSStatus.ABERTA, "2024-10-10T18:45:00.000Z", "2024-10-10T18:45:00.000Z")

        assert projections.filter_report([order], end="2024-10-10") == [order]

    def test_responsible_area_and_status(self, orders):
        assert [o.id for o in projections.filter_report(orders, responsible="ana")] == ["2", "4"]
        assert [o.id for o in projections.filter_report(orders, area="Tributário")] == ["3"]
        assert [o.id for o in projections.filter_report(orders, status="Concluída")] == ["4"]


class TestReportMetrics:
    def test_seed_metrics(self, orders):
        metrics = projections.report_metrics(orders)

        assert metrics["total"] == 4
        assert metrics["completed"] == 1
        assert metrics["total_value"] == pytest.approx(73500.0)
        # 2024-09-01 -> 2024-10-20
        assert metrics["avg_resolution_days"] == 49

    def test_no_completed_orders_means_zero(self):
        orders = [_order("1", OSStatus.ABERTA, "2024-01-01", "2024-03-01")]

        assert projections.report_metrics(orders)["avg_resolution_days"] == 0
        assert projections.report_metrics([])["avg_resolution_days"] == 0

    def test_average_uses_completed_only_and_rounds(self):
        orders = [
            _order("1", OSStatus.CONCLUIDA, "2024-01-01", "2024-01-03"),
            _order("2", OSStatus.ARQUIVADA, "2024-01-01", "2024-01-04"),
            _order("3", OSStatus.EM_ANDAMENTO, "2024-01-01", "2024-12-31"),
        ]

        # (2 + 3) / 2 = 2.5 -> 3
        assert projections.report_metrics(orders)["avg_resolution_days"] == 3
        assert projections.report_metrics(orders)["completed"] == 2


class TestCsv:
    def test_empty_export_is_header_only(self):
        text = projections.export_csv([])

        assert text.splitlines() == ["ID,Cliente,Área,Status,Responsável,Data Criação,Valor (R$)"]

    def test_rows(self, orders):
        lines = projections.export_csv(orders).split("\n")

        assert len(lines) == 5
        assert lines[1] == (
            'OS-2024-001,"Indústrias Metalúrgicas Silva",Trabalhista,Em Andamento,'
            "Dr. Rodrigo Moraes,01/10/2024,15000.00"
        )

    def test_quotes_inside_client_name_are_doubled(self):
        order = _order("1", OSStatus.ABERTA, "2024-01-05", "2024-01-05", value=12.5)
        order.client_name = 'Silva "Filho", Ltda'

        row = projections.export_csv([order]).split("\n")[1]

        assert '"Silva ""Filho"", Ltda"' in row
        assert row.endswith(",05/01/2024,12.50")

    def test_filename_is_date_stamped(self):
        assert projections.csv_filename(date(2026, 3, 7)) == "relatorio_juridico_2026-03-07.csv"


def test_two_documents_per_order(orders):
    docs = projections.list_documents(orders)

    assert len(docs) == 2 * len(orders)
    first, second = docs[0], docs[1]
    assert first["title"] == "Contrato de Honorários - Indústrias Metalúrgicas Silva"
    assert second["title"] == "Procuração Ad Judicia - Indústrias Metalúrgicas Silva"
    assert (first["id"], second["id"]) == ("1-doc1", "1-doc2")
    assert first["date"] == second["date"] == "2024-10-01"
    assert first["os_number"] == second["os_number"] == "OS-2024-001"
