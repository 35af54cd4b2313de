# jobtracker

A small desktop application for keeping track of job applications. For each
one you record the company, the position, the date you applied, its current
status, free-form notes and an optional link to the posting. Entries can be
added, edited and deleted, searched by text, filtered by status and sorted by
company or by application date.

## Installing

```
pip install .
```

The application uses only the Python standard library; the window is drawn
with `tkinter`, which some Linux distributions ship as a separate system
package (for example `python3-tk`). Python 3.10 or later is required.

## Running

```
jobtracker
jobtracker --data path/to/applications.json
```

This opens the tracker window. Applications are kept in the JSON file given
with `--data`, by default `job_applications.json` in the current working
directory; the file is created the first time something is saved. If the
file cannot be read at start-up, the tracker starts with an empty list and
reports the problem on standard error. Before an entry is deleted, the
existing file is copied to `<data file>.backup`.

### Working with the window

- **Add New Job / Hide Form** shows or hides the form for a new application.
  Company, position, date applied and status are required; notes and URL are
  optional. Adding an application saves the list straight away.
- **Edit** on a row opens that application for editing in place. From there
  you can save the changes, cancel, or delete the entry; saving and deleting
  both write the file. While editing, the header offers **Exit Edit Mode**.
- **Save** writes all applications to disk; **Reload** reads them back and
  discards unsaved edits. The header shows "Unsaved changes", the time of the
  last save, or "No changes".
- The **Filter** list restricts the table to one status (Applied, OA,
  Interview, Rejected, Offer, Accepted, Withdrawn) or shows all of them. The
  search box matches company, position and notes, ignoring case. **Clear**
  resets both.
- Clicking the **COMPANY** or **APPLIED** column header sorts by that column:
  ascending, then descending, then back to the original order. Company names
  are compared without regard to case; dates are compared as written.
- Errors while saving or loading appear in a banner below the filters and can
  be dismissed.

The footer shows how many applications are Applied, Rejected and Offers, and
how many of the total are currently shown.

### What it does not do

Clicking the position of a row that has a URL does not start a web browser:
the link is printed to standard output so that you can open it yourself.

## Using it from Python

The state and the logic behind the window can be driven without a GUI:

```python
from jobtracker.messages import SearchQueryChanged, SortBy
from jobtracker.state import JobTracker, SortColumn
from jobtracker.update import update

tracker = JobTracker.from_storage("job_applications.json")
update(tracker, SearchQueryChanged("engineer"))
update(tracker, SortBy(SortColumn.COMPANY))

for index, job in tracker.sorted_jobs():
    print(index, job.company, job.position, job.status)
```

- `jobtracker.data` holds `JobApplication` and the `JobStatus` enumeration.
- `jobtracker.messages` holds one small class per user action (`AddJob`,
  `DeleteJob`, `FilterStatusChanged`, ...); `jobtracker.update.update` applies
  one to a `JobTracker` in place.
- `jobtracker.storage` offers `load_jobs`, `save_jobs` and `backup_data` for
  reading and writing the data file directly; problems are raised as
  `StorageError` or one of its subclasses `FileOpenError`, `FileCreateError`,
  `ParseError` and `BackupError`.
- `jobtracker.ui.view.view` builds a plain description of the window's widgets
  for a given state, which `jobtracker.app.App` draws with `tkinter`.

## Running the tests

```
pip install ".[test]"
pytest
```