"""
Unit tests for the memsh audit log
"""

import os
import re
import shutil
import tempfile
import unittest
from datetime import datetime

from memsh import clock
from memsh.audit import AuditLog, AuditRecord, read_records
from memsh.exceptions import AuditLogError

class TestAuditLog(unittest.TestCase):
    """Test the CSV record store"""

    def setUp(self):
        """Set up test fixtures"""
        self.test_dir = tempfile.mkdtemp(prefix='memsh_audit_')
        self.path = os.path.join(self.test_dir, 'emulator_log.csv')

    def tearDown(self):
        """Clean up test fixtures"""
        shutil.rmtree(self.test_dir, ignore_errors=True)

    def _fixed_log(self):
        return AuditLog(self.path, timestamp=lambda: '2024-01-02 03:04:05')

    def test_record_is_quoted_csv(self):
        """Test the on-disk row format"""
        with self._fixed_log() as audit:
            audit.record('user', 'pwd', '/home/user')

        with open(self.path, encoding='utf-8', newline='') as f:
            self.assertEqual(f.read(), '"2024-01-02 03:04:05","user","pwd","/home/user"\n')

    def test_record_flushed_immediately(self):
        """Test that records reach the file before close"""
        audit = self._fixed_log().open()
        try:
            audit.record('user', 'date', 'today')
            self.assertEqual(len(read_records(self.path)), 1)
        finally:
            audit.close()

    def test_appends_across_sessions(self):
        """Test that reopening appends instead of truncating"""
        with self._fixed_log() as audit:
            audit.record('user', 'ls', 'a\nb')
        with self._fixed_log() as audit:
            audit.record('user', 'exit')

        records = read_records(self.path)
        self.assertEqual([r.action for r in records], ['ls', 'exit'])
        self.assertEqual(records[0].output, 'a\nb')
        self.assertEqual(records[1].output, '')

    def test_output_with_quotes_and_commas(self):
        """Test quoting of awkward field values"""
        with self._fixed_log() as audit:
            audit.record('user', 'cat "x", y', 'say "hi", then leave')
        record = read_records(self.path)[0]
        self.assertEqual(record.action, 'cat "x", y')
        self.assertEqual(record.output, 'say "hi", then leave')

    def test_record_requires_open_log(self):
        """Test writing to a closed log"""
        audit = self._fixed_log()
        with self.assertRaises(AuditLogError):
            audit.record('user', 'pwd')
        self.assertTrue(audit.closed)

    def test_unwritable_location(self):
        """Test opening a log below a regular file"""
        blocker = os.path.join(self.test_dir, 'file')
        with open(blocker, 'w') as f:
            f.write('')
        with self.assertRaises(AuditLogError):
            AuditLog(os.path.join(blocker, 'log.csv')).open()

    def test_filter_by_user(self):
        """Test reading records of one user"""
        with self._fixed_log() as audit:
            audit.record('alice', 'pwd', '/')
            audit.record('bob', 'ls', '')
        self.assertEqual([r.user for r in read_records(self.path, user='bob')], ['bob'])

    def test_missing_log_reads_empty(self):
        """Test reading a log that does not exist"""
        self.assertEqual(read_records(os.path.join(self.test_dir, 'none.csv')), [])

    def test_default_timestamp_format(self):
        """Test the second-precision timestamp"""
        with AuditLog(self.path) as audit:
            entry = audit.record('user', 'pwd', '/')
        self.assertRegex(entry.timestamp, r'^\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}$')

class TestAuditRecord(unittest.TestCase):
    """Test record conversion"""

    def test_to_dict(self):
        """Test dictionary conversion"""
        record = AuditRecord('t', 'user', 'ls', 'x')
        self.assertEqual(record.to_dict(), {'timestamp': 't', 'user': 'user', 'action': 'ls', 'output': 'x'})

    def test_from_row_rejects_wrong_width(self):
        """Test that short rows are refused"""
        with self.assertRaises(ValueError):
            AuditRecord.from_row(['only', 'three', 'fields'])

class TestClock(unittest.TestCase):
    """Test date formatting"""

    def test_audit_format(self):
        """Test audit timestamp formatting"""
        self.assertEqual(clock.now_audit(datetime(2024, 5, 6, 7, 8, 9)), '2024-05-06 07:08:09')

    def test_display_format(self):
        """Test date command formatting"""
        moment = datetime(2024, 5, 6, 7, 8, 9)
        self.assertEqual(clock.now_display(moment), moment.strftime('%c'))
        self.assertTrue(re.search(r'07:08:09', clock.now_display(moment)))

if __name__ == '__main__':
    unittest.main()
