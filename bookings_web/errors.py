from flask import render_template, current_app


def register_error_handlers(app):
    """Render HTML pages for errors that escape the views"""

    @app.errorhandler(404)
    def page_not_found(error):
        return render_template(
            'errors/error.html',
            title='Page not found',
            message='The page you requested does not exist.'
        ), 404

    @app.errorhandler(500)
    def internal_error(error):
        current_app.logger.error(f"Unhandled error: {str(error)}")
        return render_template(
            'errors/error.html',
            title='Something went wrong',
            message='An unexpected error occurred. Please try again later.'
        ), 500
