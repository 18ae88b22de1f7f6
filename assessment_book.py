"""
Assessment Book - competency-based assessment and class reports

Flask JSON API over the curriculum catalog, the assessment repository and the
class report aggregator. Every rule lives in the engine modules; the routes
only parse requests, call them and shape responses.
"""

from flask import Flask, request, jsonify, Response
from flask_wtf.csrf import CSRFProtect, CSRFError, generate_csrf
from flask_migrate import Migrate

import os
import logging
from dotenv import load_dotenv

import curriculum
import db
import reports
import scoring
from assessments import AssessmentRecord, AssessmentRepository, ValidationError
from record_store import CorruptRecordError, MemoryRecordStore, PostgresRecordStore
from rosters import StoreRosterSource, TeacherClassList

load_dotenv()

app = Flask(__name__)
ALLOW_INSECURE_DEFAULTS = os.environ.get('ALLOW_INSECURE_DEFAULTS', '').strip().lower() in ('1', 'true', 'yes')
secret_key = os.environ.get('SECRET_KEY')
if not secret_key:
    if ALLOW_INSECURE_DEFAULTS:
        secret_key = 'dev-secret-key-change-me'
    else:
        raise RuntimeError("SECRET_KEY is required in production. Set SECRET_KEY or enable ALLOW_INSECURE_DEFAULTS for local development.")
if not ALLOW_INSECURE_DEFAULTS and len(secret_key) < 32:
    raise RuntimeError("SECRET_KEY is too short. Use at least 32 characters in production.")
app.secret_key = secret_key
app.config['WTF_CSRF_TIME_LIMIT'] = None

csrf = CSRFProtect(app)
migrate = Migrate(app, directory='migrations')

# Set up logging
logging.basicConfig(filename=os.environ.get('LOG_FILE', 'app.log'), level=logging.INFO,
                    format='%(asctime)s - %(levelname)s - %(message)s')
if ALLOW_INSECURE_DEFAULTS:
    logging.warning("ALLOW_INSECURE_DEFAULTS is enabled. Development-only fallbacks may be active.")

DATABASE_URL = os.environ.get('DATABASE_URL', '').strip()
if DATABASE_URL:
    if not DATABASE_URL.startswith(('postgres://', 'postgresql://')):
        raise RuntimeError("DATABASE_URL must be a postgresql:// connection string.")
    store = PostgresRecordStore(DATABASE_URL)
elif ALLOW_INSECURE_DEFAULTS:
    logging.warning("DATABASE_URL is not set. Records are kept in memory and lost on restart.")
    store = MemoryRecordStore()
else:
    raise RuntimeError("PostgreSQL is required. Set DATABASE_URL to a postgresql:// connection string.")

RUN_STARTUP_DDL = os.environ.get('RUN_STARTUP_DDL', '1').strip().lower() in ('1', 'true', 'yes')
if DATABASE_URL:
    if RUN_STARTUP_DDL:
        db.init_db(DATABASE_URL)
    else:
        logging.warning("RUN_STARTUP_DDL is disabled. Ensure schema is already migrated before startup.")

repository = AssessmentRepository(store, catalog=curriculum.catalog)
roster = StoreRosterSource(store)
class_lists = TeacherClassList(store)


# ==================== ERROR HANDLERS ====================

@app.errorhandler(ValidationError)
def validation_error(error):
    return jsonify({'error': 'Validation failed', 'errors': error.errors}), 400


@app.errorhandler(CSRFError)
def csrf_error(error):
    """Handle CSRF token errors."""
    return jsonify({'error': 'CSRF token missing or invalid. Fetch /api/csrf-token and retry.'}), 400


@app.errorhandler(CorruptRecordError)
def corrupt_record(error):
    logging.error("Request %s %s failed on corrupt stored data: %s", request.method, request.path, error)
    return jsonify({'error': 'Stored data is corrupt. Contact the administrator.'}), 500


def not_found(message, **extra):
    body = {'error': message}
    body.update(extra)
    return jsonify(body), 404


# ==================== REQUEST HELPERS ====================

def _term_arg(raw, required=True):
    if raw in (None, ''):
        if required:
            raise ValidationError(['term is required'])
        return None
    try:
        term = int(raw)
    except (TypeError, ValueError):
        raise ValidationError(['term must be 1, 2 or 3']) from None
    if term not in curriculum.TERMS:
        raise ValidationError(['term must be 1, 2 or 3'])
    return term


def _required_args(*names):
    values = [(request.args.get(name) or '').strip() for name in names]
    missing = [f'{name} is required' for name, value in zip(names, values) if not value]
    if missing:
        raise ValidationError(missing)
    return values


def _parse_scores(entries, scheme):
    """Turn submitted score entries into results, rejecting marks that are not numbers."""
    if entries is None:
        return []
    if not isinstance(entries, list):
        raise ValidationError(['scores must be a list'])
    results = []
    errors = []
    for index, entry in enumerate(entries):
        if not isinstance(entry, dict):
            errors.append(f'scores[{index}] must be an object')
            continue
        if scheme == scoring.NUMERIC:
            for field in ('cat1', 'cat2', 'endTerm'):
                ok, _ = scoring.clamp_score(entry.get(field))
                if not ok:
                    errors.append(f'scores[{index}].{field} must be a number between 0 and 100')
        try:
            results.append(scoring.result_from_dict(entry, scheme))
        except ValueError as e:
            errors.append(f'scores[{index}]: {e}')
    if errors:
        raise ValidationError(errors)
    return results


def _canonical(grade, subject, term):
    """Catalog spelling of grade and subject plus the framework, or the input unchanged when unknown."""
    framework = curriculum.lookup(grade, subject, term)
    if framework is None:
        return grade, subject, None
    return curriculum.catalog.grade(grade).name, framework.name, framework


# ==================== CURRICULUM ====================

@app.route('/api/csrf-token')
def csrf_token():
    return jsonify({'csrfToken': generate_csrf()})


@app.route('/api/curriculum/<grade>/subjects')
def grade_subjects(grade):
    if curriculum.catalog.grade(grade) is None:
        return not_found(f'Unknown grade: {grade}', grades=curriculum.catalog.grades())
    return jsonify({'grade': grade, 'subjects': curriculum.subjects_offered(grade)})


@app.route('/api/curriculum/<grade>/<subject>/<term>')
def subject_framework(grade, subject, term):
    found = curriculum.lookup(grade, subject, term)
    if found is None:
        return not_found(
            f'No assessment framework for {subject} in {grade} term {term}',
            availableSubjects=curriculum.subjects_offered(grade),
        )
    data = found.to_dict()
    data['subStrandCount'] = found.sub_strand_count
    return jsonify(data)


# ==================== ASSESSMENTS ====================

@app.route('/api/assessments', methods=['GET'])
def list_assessments():
    args = request.args
    term = _term_arg(args.get('term'), required=False)
    student_id = (args.get('student_id') or '').strip()
    if student_id:
        teacher_id, grade, subject = _required_args('teacher_id', 'grade', 'subject')
        if term is None:
            raise ValidationError(['term is required'])
        record = repository.find(teacher_id, student_id, grade, subject, term)
        if record is None:
            return not_found('No assessment recorded for this student yet')
        return jsonify(record.to_dict())
    records = repository.list(
        teacher_id=args.get('teacher_id') or None,
        grade=args.get('grade') or None,
        subject=args.get('subject') or None,
        term=term,
    )
    return jsonify({'assessments': [r.to_dict() for r in records]})


@app.route('/api/assessments', methods=['POST'])
def save_assessment():
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise ValidationError(['Request body must be a JSON object'])

    grade = (data.get('grade') or '').strip()
    subject = (data.get('subject') or '').strip()
    term = _term_arg(data.get('term'))
    framework = curriculum.lookup(grade, subject, term) if grade and subject else None
    if grade and subject and framework is None:
        return not_found(
            f'No assessment framework for {subject} in {grade} term {term}',
            availableSubjects=curriculum.subjects_offered(grade),
        )

    candidate = AssessmentRecord(
        teacher_id=data.get('teacherId'),
        teacher_name=data.get('teacherName'),
        student_id=data.get('studentId'),
        student_name=data.get('studentName'),
        admission_no=data.get('admissionNo'),
        grade=curriculum.catalog.grade(grade).name if framework else grade,
        subject=framework.name if framework else subject,
        term=term,
        school_code=data.get('schoolCode'),
        scores=_parse_scores(data.get('scores'), framework.scheme) if framework else [],
    )
    existing = repository.find(candidate.teacher_id, candidate.student_id, candidate.grade, candidate.subject, term)
    record = repository.upsert(candidate)
    return jsonify(record.to_dict()), (200 if existing else 201)


@app.route('/api/assessments/<record_id>', methods=['DELETE'])
def delete_assessment(record_id):
    if not repository.remove(record_id):
        return not_found('Assessment not found')
    return jsonify({'deleted': record_id})


@app.route('/api/assessments/students')
def assessed_students():
    teacher_id, grade, subject = _required_args('teacher_id', 'grade', 'subject')
    term = _term_arg(request.args.get('term'))
    grade, subject, _ = _canonical(grade, subject, term)
    return jsonify({'students': repository.list_assessed_students(teacher_id, grade, subject, term)})


@app.route('/api/assessments/summary')
def assessment_summary():
    teacher_id, grade, subject = _required_args('teacher_id', 'grade', 'subject')
    term = _term_arg(request.args.get('term'))
    grade, subject, framework = _canonical(grade, subject, term)
    rows = repository.summary(teacher_id, grade, subject, term, scheme=framework.scheme if framework else None)
    return jsonify({
        'subStrandCount': framework.sub_strand_count if framework else 0,
        'students': rows,
    })


# ==================== CLASS LISTS ====================

@app.route('/api/class-lists/<teacher_id>/<grade>', methods=['GET'])
def get_class_list(teacher_id, grade):
    subject = (request.args.get('subject') or '').strip()
    term = _term_arg(request.args.get('term'), required=False)
    students = class_lists.students(teacher_id, grade, repository=repository, subject=subject, term=term)
    return jsonify({'students': students})


@app.route('/api/class-lists/<teacher_id>/<grade>', methods=['POST'])
def add_to_class_list(teacher_id, grade):
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise ValidationError(['Request body must be a JSON object'])
    student = class_lists.add_student(teacher_id, grade, data.get('name'), data.get('admissionNo'))
    return jsonify(student), 201


# ==================== REPORTS ====================

def _class_report():
    class_id, stream_id = _required_args('class_id', 'stream_id')
    term = _term_arg(request.args.get('term'))
    return reports.build_class_report(roster, repository, class_id, stream_id, term)


@app.route('/api/reports/class')
def class_report():
    report = _class_report()
    return jsonify(report.to_dict(query=request.args.get('q')))


@app.route('/api/reports/class.csv')
def class_report_csv():
    report = _class_report()
    filename = f"class_report_{request.args.get('class_id')}_{request.args.get('stream_id')}_term{report.term}.csv"
    return Response(
        reports.export_csv(report, query=request.args.get('q')),
        mimetype='text/csv',
        headers={'Content-Disposition': f'attachment; filename={filename}'}
    )


if __name__ == '__main__':
    port = int(os.environ.get('PORT', 5000))
    debug = os.environ.get('FLASK_DEBUG', '0').strip().lower() in ('1', 'true', 'yes')
    app.run(host='0.0.0.0', port=port, debug=debug)
