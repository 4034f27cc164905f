import pandas as pd


HISTORY_COLUMNS = ['expression', 'result', 'value']


def history_to_frame(entries):
    """Build a DataFrame (expression, result, value) from calculation tape entries."""
    return pd.DataFrame(list(entries), columns=HISTORY_COLUMNS)


def export_history(entries, path):
    """
    Export the calculation tape.

    File layout:
        - .csv: one row per calculation, columns expression/result/value.
        - anything else: Excel workbook with a single "History" sheet.

    Args:
        entries: List of tape dicts (Calculator.history).
        path: Output file path.

    Raises:
        ValueError: If there is nothing to export.
    """
    if not entries:
        raise ValueError("No calculations to export.")

    df = history_to_frame(entries)
    path = str(path)

    if path.lower().endswith('.csv'):
        df.to_csv(path, index=False, encoding='utf-8')
    else:
        with pd.ExcelWriter(path, engine='xlsxwriter') as writer:
            df.to_excel(writer, sheet_name='History', index=False)

    print(f"[EXPORT] {len(df)} calculations written to {path}")


def load_history(path):
    """
    Load a tape previously written by export_history.

    Returns:
        List of dicts with keys expression, result, value.

    Raises:
        ValueError: If the file cannot be decoded or lacks tape columns.
    """
    path = str(path)
    filename = path.split('\\')[-1] if '\\' in path else path.split('/')[-1]

    if path.lower().endswith('.csv'):
        # Try multiple encodings to handle files re-saved by spreadsheet tools
        encodings = ['utf-8', 'utf-8-sig', 'latin-1', 'cp1252']
        df = None

        for enc in encodings:
            try:
                df = pd.read_csv(path, encoding=enc, dtype=str)
                print(f"[DEBUG] {filename} loaded with encoding: {enc}")
                break
            except (UnicodeDecodeError, LookupError):
                continue

        if df is None:
            raise ValueError(f"Could not load {filename} with any supported encoding")
    else:
        df = pd.read_excel(path, sheet_name='History', dtype=str)

    missing = [c for c in HISTORY_COLUMNS if c not in df.columns]
    if missing:
        raise ValueError(f"{filename} is missing columns: {', '.join(missing)}")

    df['value'] = df['value'].astype(float)
    print(f"[LOAD] {len(df)} calculations read from {filename}")
    return df[HISTORY_COLUMNS].to_dict('records')
