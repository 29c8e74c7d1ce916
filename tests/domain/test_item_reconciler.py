from mis_dashboard.domain.models import ItemRow, RawRecord
from mis_dashboard.domain.services import ItemReconciler, number_dtm_rows


def test_scenario_builds_detail_then_summary():
    dispatch = [{"category": "COUPLER", "dm_daily": "2", "dm_month": "40", "dis_daily": "1", "dis_month": "20"}]
    combine = [{"category": "COUPLER_ASSM", "t_menge": "100", "d_act": "3", "m_act": "60"}]
    stock = [{"parameter": "Total Stock", "menge": "500"}]

    rows = ItemReconciler().build(combine, dispatch, stock)

    assert [row.to_dict() for row in rows] == [
        {
            "sl_no": "1",
            "item_name": "COUPLER",
            "target": "100",
            "actual_on_date": "3",
            "actual_till_date": "60",
            "dm_item": "COUPLER",
            "dm_actual_on_date": "2",
            "dm_actual_till_date": "40",
            "disp_actual_on_date": "1",
            "disp_actual_till_date": "20",
            "isSummary": False,
        },
        {
            "sl_no": "",
            "item_name": "Total Stock",
            "target": "500",
            "actual_on_date": "",
            "actual_till_date": "",
            "dm_item": "",
            "dm_actual_on_date": "",
            "dm_actual_till_date": "",
            "disp_actual_on_date": "",
            "disp_actual_till_date": "",
            "isSummary": True,
        },
    ]


def test_join_matches_on_normalized_key():
    rows = ItemReconciler().build([{"category": "BOGIE_ASSY", "t_menge": "5.0"}], [{"category": "BOGIE"}], [])

    assert rows[0].target == "5.0"


def test_unmatched_dispatch_row_gets_zeroed_figures():
    rows = ItemReconciler().build([{"category": "BOGIE", "t_menge": "9"}], [{"category": "WHEEL"}], [])

    row = rows[0]
    assert row.target == row.actual_on_date == row.actual_till_date == "0.000"
    assert row.dm_actual_on_date == row.disp_actual_till_date == "0.000"
    assert row.item_name == "WHEEL"


def test_every_dispatch_row_emits_one_detail_row_in_order():
    dispatch = [{"category": "D_GEAR"}, {"category": "BOGIE"}, {"category": "COUPLER"}, {"category": "BOGIE"}]

    rows = ItemReconciler().build([], dispatch, [])

    assert [row.item_name for row in rows] == ["D GEAR", "BOGIE", "COUPLER", "BOGIE"]
    assert [row.sl_no for row in rows] == ["1", "2", "3", "4"]
    assert not any(row.is_summary for row in rows)


def test_summary_rows_follow_all_detail_rows():
    stock = [{"parameter": "Opening"}, {"parameter": "Closing", "menge": "12"}]

    rows = ItemReconciler().build([], [{"category": "A"}, {"category": "B"}], stock)

    flags = [row.is_summary for row in rows]
    assert flags == [False, False, True, True]
    assert [row.item_name for row in rows[2:]] == ["Opening", "Closing"]
    assert rows[2].target == "0.000"
    assert rows[3].target == "12"


def test_empty_and_missing_fields_fall_back_to_default():
    combine = [{"category": "BOGIE", "t_menge": "", "d_act": None}]
    dispatch = [RawRecord(category="BOGIE", dm_daily="")]

    row = ItemReconciler().build(combine, dispatch, [])[0]

    assert row.target == "0.000"
    assert row.actual_on_date == "0.000"
    assert row.dm_actual_on_date == "0.000"


def test_missing_category_and_parameter_do_not_raise():
    rows = ItemReconciler().build([{}], [{}], [{}])

    assert rows[0].item_name == ""
    assert rows[1] == ItemRow("", "", "0.000", "", "", "", "", "", "", "", is_summary=True)


def test_duplicate_combine_keys_keep_last_row():
    combine = [
        {"category": "BOGIE_ASSY", "t_menge": "1"},
        {"category": "bogie assembly", "t_menge": "2"},
    ]

    reconciler = ItemReconciler()
    rows = reconciler.build(combine, [{"category": "BOGIE"}], [])

    assert rows[0].target == "2"
    assert reconciler.duplicate_keys(combine) == {"BOGIE": 2}


def test_custom_missing_value():
    rows = ItemReconciler(missing_value="-").build([], [{"category": "X"}], [])

    assert rows[0].target == "-"


def test_number_dtm_rows_assigns_sequence():
    dtm = [{"plant": "P1", "budat": "20240101"}, {"plant": "P2"}]

    numbered = number_dtm_rows(dtm)

    assert [row["sl_no"] for row in numbered] == ["1", "2"]
    assert numbered[0]["plant"] == "P1"
    assert "sl_no" not in dtm[0]
